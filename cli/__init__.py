"""CLI package for the bookstore"""
from .main import cli

__all__ = ['cli']
