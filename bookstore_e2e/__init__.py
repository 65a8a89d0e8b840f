"""
DemoQA bookstore end-to-end suite components.

This package contains the page object for the books grid, the advertisement
overlay dismissal routine, and a thin client for the bookstore HTTP API.
"""
