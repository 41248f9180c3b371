"""rssreader - a personal feed aggregator for RSS, JSON and ParseHub feeds."""

__version__ = "0.1.0"
