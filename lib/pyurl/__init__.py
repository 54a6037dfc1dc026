""" The PyURL module is used to split, join and resolve URLs. """
from .url import UrlComponents, join, split
from .resolver import remove_dot_segments, to_absolute

__all__ = ['UrlComponents', 'split', 'join', 'remove_dot_segments',
           'to_absolute']
