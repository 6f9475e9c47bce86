"""
应用层
"""
from .mathjax_loader import MathJaxLoader
from .filter_handler import MathJaxFilterHandler
from .render_orchestrator import RenderOrchestrator

__all__ = ["MathJaxLoader", "MathJaxFilterHandler", "RenderOrchestrator"]
