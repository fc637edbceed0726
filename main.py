import argparse
import sys

from config.settings import load_settings
from controllers.csv_controller import CSVController
from ui.console_menu import ConsoleMenu


def setup_console():
    # Consolas de Windows no siempre arrancan en UTF-8
    for stream in (sys.stdout, sys.stdin):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tabla persistida en un archivo CSV.")
    parser.add_argument("path", nargs="?", help="archivo de la tabla (por defecto TABLE_STORE_PATH o table.csv)")
    parser.add_argument("--gui", action="store_true", help="abrir la ventana en lugar del menú de consola")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings()
    path = args.path or settings.table_path
    controller = CSVController(path, settings)
    if args.gui:
        from ui.main_window import MainWindow
        MainWindow(controller).mainloop()
    else:
        setup_console()
        ConsoleMenu(controller).run()


if __name__ == "__main__":
    main()
