import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("USER_AGENT", "MapCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
MAX_RETRIES = get_int_env("MAPCRAWL_MAX_RETRIES", 3)
RETRY_DELAY = get_float_env("MAPCRAWL_RETRY_DELAY", 0.1)
MAX_WORKERS = get_int_env("MAPCRAWL_MAX_WORKERS", 16)
DEFAULT_URL = get_str_env("MAPCRAWL_DEFAULT_URL", "https://monzo.com/")
DEFAULT_DEPTH = get_int_env("MAPCRAWL_DEFAULT_DEPTH", 5)
OUTPUT_FILE = get_str_env("MAPCRAWL_OUTPUT_FILE", "out.txt")
LOG_LEVEL = get_str_env("MAPCRAWL_LOG_LEVEL", "WARNING").strip().upper()
