# Varshaphala Engine - Tools
from .varshaphala_tool import build_natal_chart, get_varshaphala, natal_summary

__all__ = ["build_natal_chart", "get_varshaphala", "natal_summary"]
