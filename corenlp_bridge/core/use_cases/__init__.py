from .select_language import SelectLanguage
from .load_pipeline import LoadPipeline

__all__ = [
    "SelectLanguage",
    "LoadPipeline",
]
