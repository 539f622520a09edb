import sys

from PyQt5.QtWidgets import QApplication

from livetext.ui import MainWindow
from livetext.utils.logging_config import setup_logging


def main():
    """
    Main function to run the live-text image preview.
    It checks for an image path passed as a command-line argument.
    """
    log_manager = setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Live Text Preview")

    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]

    window = MainWindow(file_path)
    window.resize(1200, 800)
    window.show()

    exit_code = app.exec_()
    log_manager.shutdown()
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
