"""Readiness - AI-readiness scoring engine for crawled web pages."""

__version__ = "0.1.0"
