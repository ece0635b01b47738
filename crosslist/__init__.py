"""
Crosslist - intersect exported follower lists and classify the common names.

Two CSV exports go in, the usernames present in both come out, optionally
filtered by the apparent gender of each display name.
"""

__version__ = "1.0.0"
