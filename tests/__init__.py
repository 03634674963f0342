"""
Test suite for namefit - file name measurement and truncation.

This package contains comprehensive tests including:
- Unit tests for individual components against fixed-advance mock fonts
- Integration tests against real fonts through Pillow
- Edge case tests for Unicode and degenerate widths
"""
