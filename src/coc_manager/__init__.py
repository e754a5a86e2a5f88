"""CoC Manager - Save slot manager for Corruption of Champions.

This application provides:
    - Discovery of Flash shared-object saves in the standalone, browser
      and online game locations
    - Reconciliation of discovered files against the ten game save slots
      (Coc_1.sol .. Coc_10.sol)
    - Open and Save menus built from the reconciled slots, plus Import and
      Export to arbitrary paths

The application uses CustomTkinter for the GUI and stores its settings
in %APPDATA%/CoCManager.

Package Structure:
    app: Main application entry point and orchestrator
    config: Paths, settings schema and XML settings persistence
    core: Catalogs, slot resolution, menu assembly, dispatch and scanning
    gui: User interface components (main window, file pickers)
    assets: Pillow-drawn icons

Quick Start:
    Run from command line::

        coc-manager

    Or programmatically::

        from coc_manager.app import main
        main()

Configuration:
    - Config file: %APPDATA%/CoCManager/configuration.xml
    - Log file: %APPDATA%/CoCManager/coc_manager.log
"""

__version__ = "1.0.0"
__app_name__ = "CoC Manager"
