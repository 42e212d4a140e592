"""annogen - annotation templates for documentation-comment generators"""

__version__ = "0.1.0"
