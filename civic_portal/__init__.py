"""Civic portal content kernel.

Domain model, query services and use cases behind the organization's
public site: projects, events, news, users and the about page.
"""

__version__ = "1.0.0"
