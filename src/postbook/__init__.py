"""
Postbook - personal notes organised by category and tags.

A small multi-user REST service: each user keeps private posts, filters them
by category, tag or free text, and browses the categories and tags in use.
"""

__version__ = "1.0.0"
