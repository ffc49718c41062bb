"""
Enum definitions for record processing results
"""
from enum import Enum

class Status(Enum):
    OK = "OK"
    FAILED = "FAILED"
    TIMEOUT = "TIMEOUT"

class FetcherType(Enum):
    BROWSER = "browser"
    HTTP = "http"

class SuffixMode(Enum):
    END = "end"
    ANYWHERE = "anywhere"
