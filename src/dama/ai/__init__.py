"""Computer opponent: evaluation and move selection."""

from .eval import WIN_SCORE, evaluate_material, material_counts, score_immediate
from .search import Difficulty, MinimaxSearch, SearchResult, choose_move

__all__ = [
    'WIN_SCORE',
    'evaluate_material',
    'material_counts',
    'score_immediate',
    'Difficulty',
    'MinimaxSearch',
    'SearchResult',
    'choose_move',
]
