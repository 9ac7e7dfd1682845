# hdnav/app.py
import logging
import sys
from PySide6.QtWidgets import QApplication
from .main_window import MainWindow
from .settings import load_settings

class HdnavApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("hdnav")

def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.get("log_level", "INFO"),
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    app = HdnavApp(sys.argv)
    win = MainWindow(settings=settings)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
