import logging
import sys

from sgf2gif.config import log_file_path

class Sgf2GifLogger:
    """システム全体のロギングを統括するクラス"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Sgf2GifLogger, cls).__new__(cls)
            cls._instance._setup_logger()
        return cls._instance

    def _setup_logger(self):
        self.logger = logging.getLogger("SGF2GIF")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # フォーマット定義: [時刻] [レイヤー] [レベル] メッセージ
        formatter = logging.Formatter(
            '[%(asctime)s] [%(layer)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # コンソール出力設定 (標準出力はGIFのパイプ等に使われうるのでstderr)
        self.console_handler = logging.StreamHandler(sys.stderr)
        self.console_handler.setFormatter(formatter)
        self.console_handler.setLevel(logging.INFO)
        self.logger.addHandler(self.console_handler)

        # ファイル出力設定 (環境変数で指定された場合のみ)
        path = log_file_path()
        if path:
            file_handler = logging.FileHandler(path, encoding='utf-8')
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)
            self.logger.addHandler(file_handler)

    def set_console_level(self, level):
        self.console_handler.setLevel(level)

    def log(self, level, message, layer="SYSTEM"):
        """共通ログ出力メソッド"""
        self.logger.log(level, message, extra={'layer': layer.upper()})

    def debug(self, message, layer="SYSTEM"):
        self.log(logging.DEBUG, message, layer)

    def info(self, message, layer="SYSTEM"):
        self.log(logging.INFO, message, layer)

    def warning(self, message, layer="SYSTEM"):
        self.log(logging.WARNING, message, layer)

    def error(self, message, layer="SYSTEM"):
        self.log(logging.ERROR, message, layer)

# Global Singleton Instance
logger = Sgf2GifLogger()
