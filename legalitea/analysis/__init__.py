from legalitea.analysis.analyzer import Analyzer
from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.factory import AnalyzerFactory
from legalitea.analysis.fallback import FallbackAnalyzer

__all__ = ["Analyzer", "AnalyzerFactory", "BaseAnalyzer", "FallbackAnalyzer"]
