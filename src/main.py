import sys
import logging
import argparse

from PySide6.QtWidgets import QApplication, QMainWindow

import config
from canvas_widget import Canvas
from tree_generator import TreeParams

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, params=None, seed=None):
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.canvas = Canvas(params, seed)
        self.setCentralWidget(self.canvas)
        self.resize(config.FRAME_WIDTH, config.FRAME_HEIGHT)


def parse_args(argv):
    parser = argparse.ArgumentParser(description="Click, drag and release to paint a recursive tree.")
    parser.add_argument("--generations", type=int, default=config.NUM_GENERATIONS,
                        help="number of branch generations (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="fixed random seed, every gesture paints a reproducible tree")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    # El resto de argumentos (p.ej. -platform) se pasan a Qt
    return parser.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
            level=getattr(logging, args.log_level),
            format='[%(asctime)s] %(levelname)s: %(message)s',
            datefmt='%H:%M:%S'
            )
    params = TreeParams(generations=args.generations)

    app = QApplication([sys.argv[0]] + qt_args)
    window = MainWindow(params, args.seed)
    window.show()
    logger.info("Tree painter ready (%d generations)", params.generations)
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
