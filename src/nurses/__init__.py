from .config import Config, cfg
from .main import run_enumeration
from .model import NurseModel
from .result_types import EnumerationResult

__all__ = ["Config", "cfg", "NurseModel", "EnumerationResult", "run_enumeration"]
