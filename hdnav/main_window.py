# hdnav/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QWidget,
    QLineEdit, QToolBar
)
from .tab_manager import TabManager
from .address_bar import AddressBarController

class MainWindow(QMainWindow):
    def __init__(self, settings: dict, parent=None):
        super().__init__(parent)
        self.setWindowTitle("hdnav")
        self.resize(1024, 768)

        self.tabs = TabManager(settings)  # create tabs first

        # Address bar
        self.address_bar = QLineEdit()
        self.address_bar.setPlaceholderText("hd://")
        self.address_controller = AddressBarController(self.tabs)
        self.address_controller.bind(self.address_bar)

        self.tabs.address_controller = self.address_controller

        toolbar = QToolBar()
        toolbar.addWidget(self.address_bar)
        self.addToolBar(toolbar)

        # Central widget
        central = QWidget()
        layout = QVBoxLayout()
        layout.addWidget(self.tabs)
        central.setLayout(layout)
        self.setCentralWidget(central)

        # First tab: configured home, else whatever the resolver settles on
        self.tabs.create_browser_tab(settings.get("shell", {}).get("home"))
