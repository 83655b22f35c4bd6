"""
Careers - Job posting micro-site with application review.
"""

__version__ = "1.0.0"
