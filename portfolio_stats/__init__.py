"""GitHub portfolio statistics: profile, ranked repositories, languages and stars."""

__version__ = '1.0.0'
