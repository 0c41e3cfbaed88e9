"""Issue reaction report.

Scans GitHub repositories for issues carrying a label of interest and
writes a JSON summary of their reaction counts:
- repositories are given as github.com URLs
- issues qualify through the first matching label
- output is a pretty-printed JSON array
"""

__version__ = "1.0.0"
