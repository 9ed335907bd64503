"""
Utility package for text segmentation helpers.
"""

from .words import first_words, iter_word_bound_indices

__all__ = [
    'first_words',
    'iter_word_bound_indices'
]
