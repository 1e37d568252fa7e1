from __future__ import annotations
import logging
import sys
from loguru import logger

DEFAULT_NAME = "floodwatch"

# 외부 라이브러리 로거 → 최소 레벨
NOISY_LOGGERS = {
    "uvicorn": "INFO",
    "uvicorn.access": "WARNING",
    "asyncio": "WARNING",
    "aiohttp": "WARNING",
}

# ---- stdlib logging → loguru 인터셉트 ----
class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.bind(name=record.name).opt(depth=6, exception=record.exc_info).log(level, record.getMessage())

def _hook_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name, level in NOISY_LOGGERS.items():
        l = logging.getLogger(name)
        l.handlers = [InterceptHandler()]
        l.setLevel(level)
        l.propagate = False

# ---- 콘솔 포맷: 바인딩된 모듈 이름 표시 ----
DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<7}</level> | "
    "<cyan>{extra[name]}</cyan> - "
    "<level>{message}</level>"
)

def _reset(log_level: str) -> str:
    logger.remove()
    logger.configure(extra={"name": DEFAULT_NAME})
    return log_level.upper()

def setup_logging_dev(log_level: str = "INFO") -> None:
    """
    개발 콘솔 전용 loguru 초기화 (컬러, stdlib logging 흡수).
    """
    logger.add(
        sink=sys.stdout,
        format=DEV_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=False,
        level=_reset(log_level),
    )
    _hook_stdlib_logging()

def setup_logging_json(log_level: str = "INFO") -> None:
    """
    운영용 JSON 로그 초기화.
    - 한 줄에 하나의 레코드, bind/contextualize 된 값은 record.extra 로 직렬화
    """
    logger.add(
        sink=sys.stdout,
        serialize=True,
        backtrace=False,
        diagnose=False,
        level=_reset(log_level),
        enqueue=True,
    )
    _hook_stdlib_logging()

def setup_logging(log_level: str = "INFO", json: bool = False) -> None:
    (setup_logging_json if json else setup_logging_dev)(log_level)

def get_logger(name: str = DEFAULT_NAME, **ctx):
    """모듈 이름(과 선택적 컨텍스트)을 바인딩한 logger 반환."""
    return logger.bind(name=name, **ctx)

def with_context(**ctx):
    """컨텍스트 매니저 안의 모든 로그에 값을 덧붙입니다 (예: 갱신 회차)."""
    return logger.contextualize(**ctx)
