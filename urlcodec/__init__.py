import os
import logging
from logging.handlers import TimedRotatingFileHandler, WatchedFileHandler
from typing import Optional
from flask import Flask
from flask_cors import CORS

from .config.system_settings import Settings
from .middleware import register_error_handlers, setup_middleware
from .api.routes import register_routes
from .services.codec import (  # noqa: F401
    CharsetClass,
    CodecError,
    DecodeError,
    InvalidByteSequence,
    InvalidEscapeSequence,
    UnmappableCharacter,
    UnrecognizedEncoding,
    resolve_charset,
    supported_encodings,
    encode,
    decode,
    url_encode,
    url_decode,
)


def create_app(settings: Optional[Settings] = None) -> Flask:
    app = Flask(__name__)
    settings = settings or Settings()
    if not settings.validate():
        raise RuntimeError('配置校验失败，请检查 DEFAULT_ENCODING / DECODE_ERRORS / 日志目录')
    app.config.update(settings.to_flask_config())
    app.json.ensure_ascii = False

    CORS(app, origins="*", send_wildcard=True, methods=["GET","POST","OPTIONS"], allow_headers=["Content-Type","Authorization","X-Requested-With"])

    _configure_logging(settings)

    setup_middleware(app)
    register_error_handlers(app)
    register_routes(app, url_prefix=settings.API_PREFIX)

    logging.getLogger(__name__).info(f"应用初始化完成 (default encoding: {settings.DEFAULT_ENCODING})")
    return app


def _configure_logging(settings: Settings):
    root_logger = logging.getLogger()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s', '%Y-%m-%d %H:%M:%S')
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if not settings.LOG_TO_FILE:
        return

    try:
        log_file = os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)
        os.makedirs(settings.LOG_DIR or '.', exist_ok=True)
        # WatchedFileHandler 配合外部 logrotate，多进程部署时使用
        if settings.USE_WATCHED_LOG:
            file_handler = WatchedFileHandler(log_file, encoding='utf-8')
        else:
            file_handler = TimedRotatingFileHandler(log_file, when='midnight', backupCount=settings.LOG_BACKUP_COUNT, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f'文件日志配置失败: {e}')

__all__ = [
    'create_app',
    'Settings',
    'CharsetClass',
    'CodecError',
    'DecodeError',
    'InvalidByteSequence',
    'InvalidEscapeSequence',
    'UnmappableCharacter',
    'UnrecognizedEncoding',
    'resolve_charset',
    'supported_encodings',
    'encode',
    'decode',
    'url_encode',
    'url_decode',
]
