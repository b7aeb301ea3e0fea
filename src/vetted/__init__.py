"""vetted — smart constructors with accumulated validation."""

__version__ = "0.1.0"
