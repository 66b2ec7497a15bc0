"""
Package marker for Selenium page objects in `src.ui`.
"""
