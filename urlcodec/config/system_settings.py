"""应用配置 - 统一的配置参数管理"""
import os
import logging
import configparser
from dataclasses import dataclass, field
from pathlib import Path

from urlcodec.services.codec import CodecError, resolve_charset

logger = logging.getLogger(__name__)

_DECODE_ERROR_MODES = ("strict", "replace")


def _get_config_file() -> str:
    """获取配置文件路径（环境变量 > 当前目录 > 项目根目录）"""
    if env_config := os.getenv("SETTINGS_FILE"):
        logger.debug(f"[config] Using config from env: {env_config}")
        return env_config

    cwd_config = Path.cwd() / "settings.ini"
    if cwd_config.exists():
        logger.debug(f"[config] Using config from cwd: {cwd_config}")
        return str(cwd_config)

    root_config = Path(__file__).parent.parent.parent / "settings.ini"
    if root_config.exists():
        logger.debug(f"[config] Using config from root: {root_config}")
        return str(root_config)

    # 文件不存在时使用默认值
    return str(cwd_config)


def _load_config() -> configparser.ConfigParser:
    """加载外部配置文件"""
    config = configparser.ConfigParser()
    config_file = _get_config_file()

    if not os.path.exists(config_file):
        return config

    # 配置文件可能是 UTF-8（带或不带 BOM）或 GBK
    for encoding in ('utf-8', 'utf-8-sig', 'gbk'):
        try:
            config.read(config_file, encoding=encoding)
        except (UnicodeDecodeError, configparser.Error) as e:
            logger.debug(f"[config] Failed to read with encoding {encoding}: {e}")
            continue
        # 读取成功即停止，空文件（没有 section）也算成功
        logger.debug(f"[config] Loaded {config_file} ({encoding}), sections: {config.sections()}")
        break
    else:
        logger.error(f"[config] Failed to read config file with any encoding: {config_file}")
    return config


def _get_bool(env_name: str, default: bool, config_section: str = None, config_key: str = None) -> bool:
    """解析布尔值：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return str(raw).strip().lower() in {"1", "true", "yes", "y", "on"}

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getboolean(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid boolean for {config_section}.{config_key}, using default")

    return default


def _get_int(env_name: str, default: int, config_section: str = None, config_key: str = None) -> int:
    """解析整数：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        try:
            return int(raw) if raw.strip() else default
        except ValueError:
            logger.warning(f"[config] Invalid integer in {env_name}: {raw!r}")

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getint(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid integer for {config_section}.{config_key}, using default")

    return default


def _get_str(env_name: str, default: str, config_section: str = None, config_key: str = None) -> str:
    """解析字符串：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return raw

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            return _config.get(config_section, config_key)

    return default


@dataclass
class Settings:
    """应用配置类 - 优先级：环境变量 > settings.ini > 默认值

    字段在实例化时解析，修改环境变量后重新创建实例即可生效。
    """

    # ===== 服务器配置 =====
    HOST: str = field(default_factory=lambda: _get_str("APP_HOST", "0.0.0.0", "server", "host"))
    PORT: int = field(default_factory=lambda: _get_int("APP_PORT", 8000, "server", "port"))
    DEBUG: bool = field(default_factory=lambda: _get_bool("APP_DEBUG", False, "server", "debug"))

    # ===== API 配置 =====
    API_PREFIX: str = field(default_factory=lambda: _get_str("API_PREFIX", "/api/v1", "api", "api_prefix"))
    MAX_CONTENT_LENGTH: int = field(default_factory=lambda: _get_int("MAX_CONTENT_LENGTH", 1024 * 1024, "api", "max_content_length"))

    # ===== 日志配置 =====
    LOG_LEVEL: str = field(default_factory=lambda: _get_str("APP_LOG_LEVEL", "INFO", "log", "log_level").upper())
    LOG_DIR: str = field(default_factory=lambda: _get_str("APP_LOG_DIR", "logs", "log", "log_dir"))
    LOG_FILE_NAME: str = field(default_factory=lambda: _get_str("APP_LOG_FILE", "app.log", "log", "log_file"))
    LOG_BACKUP_COUNT: int = field(default_factory=lambda: _get_int("APP_LOG_BACKUP", 7, "log", "log_backup_count"))
    USE_WATCHED_LOG: bool = field(default_factory=lambda: _get_bool("APP_USE_WATCHED_LOG", False, "log", "use_watched_log"))
    LOG_TO_FILE: bool = field(default_factory=lambda: _get_bool("APP_LOG_TO_FILE", True, "log", "log_to_file"))

    # ===== 编解码配置 =====
    DEFAULT_ENCODING: str = field(default_factory=lambda: _get_str("DEFAULT_ENCODING", "utf-8", "codec", "default_encoding"))
    DECODE_ERRORS: str = field(default_factory=lambda: _get_str("DECODE_ERRORS", "replace", "codec", "decode_errors").lower())

    # ===== 方法 =====
    def to_flask_config(self) -> dict:
        """转换为 Flask 配置格式"""
        return {
            "DEBUG": self.DEBUG,
            "MAX_CONTENT_LENGTH": self.MAX_CONTENT_LENGTH,
            "DEFAULT_ENCODING": self.DEFAULT_ENCODING,
            "DECODE_ERRORS": self.DECODE_ERRORS,
            "API_VERSION": self.API_PREFIX.rstrip("/").rsplit("/", 1)[-1] or "v1",
        }

    def validate(self) -> bool:
        """验证配置并创建日志目录"""
        try:
            resolve_charset(self.DEFAULT_ENCODING)
        except CodecError as e:
            logger.error(f"[config] DEFAULT_ENCODING 无效: {e}")
            return False
        if self.DECODE_ERRORS not in _DECODE_ERROR_MODES:
            logger.error(f"[config] DECODE_ERRORS 必须是 {'/'.join(_DECODE_ERROR_MODES)} 之一，当前值: {self.DECODE_ERRORS}")
            return False

        if self.LOG_TO_FILE and self.LOG_DIR and not os.path.exists(self.LOG_DIR):
            try:
                os.makedirs(self.LOG_DIR, exist_ok=True)
            except OSError as e:
                logger.error(f"[config] 无法创建日志目录 {self.LOG_DIR}: {e}")
                return False

        return True


__all__ = ["Settings"]
