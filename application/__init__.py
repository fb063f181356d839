"""
Application Layer for the Capture Records API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Record listing, loading and content rendering
- exceptions.py: Error taxonomy shared with the infrastructure layer
"""
