"""Search UK NaPTAN bus stops and measure great-circle distances between them."""

__version__ = "0.1.0"
