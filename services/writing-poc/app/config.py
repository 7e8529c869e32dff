import os
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_DIR = "./data"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

def get_data_dir() -> str:
    # Where progress and practice history are kept
    return os.environ.get("WRITING_DATA_DIR", DEFAULT_DATA_DIR)

def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

def get_bind() -> Tuple[str, int]:
    return os.environ.get("WRITING_HOST", DEFAULT_HOST), int(os.environ.get("WRITING_PORT", DEFAULT_PORT))
