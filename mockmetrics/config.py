# -*- coding: utf-8 -*-

import os

from dotenv import dotenv_values, find_dotenv


def _load_dotenv_values() -> dict:
    path = find_dotenv(usecwd=True)
    if not path:
        return {}
    return {key: value for key, value in dotenv_values(path).items() if value is not None}


# Значения из .env только дополняют окружение и никогда не попадают в os.environ,
# чтобы не протекать в процесс тестов, который использует мок.
_DOTENV = _load_dotenv_values()


def _env_raw(name: str, *, strip: bool = True) -> str:
    value = os.getenv(name)
    if value is None:
        value = _DOTENV.get(name, "")
    value = str(value)
    return value.strip() if strip else value


def _env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = _env_raw(name, strip=strip)
    return value or default


def _env_bool(name: str, default: bool) -> bool:
    raw = _env_raw(name).lower()
    if not raw:
        return default
    return raw not in {"0", "false", "off", "no"}


def _env_level(name: str, default: str) -> str:
    raw = _env_raw(name).upper()
    if raw in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return raw
    return default


# Разделитель значений меток в ключе хранилища; пробелы не обрезаются
DELIMITER_DEFAULT = _env_str("MOCK_METRICS_DELIMITER", ".", strip=False)

# Логирование ошибок валидации перед вызовом panic-колбэка
LOG_FAILURES = _env_bool("MOCK_METRICS_LOG_FAILURES", True)
LOG_LEVEL = _env_level("MOCK_METRICS_LOG_LEVEL", "WARNING")
LOG_JSON = _env_bool("MOCK_METRICS_LOG_JSON", False)

# Число корзин гистограммы по умолчанию для реестра (только для совместимости интерфейса)
HISTOGRAM_BUCKETS_DEFAULT = 50
