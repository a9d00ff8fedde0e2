#!/usr/bin/env python3
"""
Analysis framework for feed word frequencies.
"""

from .pipeline import FeedWordAnalyzer

__all__ = ['FeedWordAnalyzer']
