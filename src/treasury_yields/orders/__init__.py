"""Order intake consuming the yield curve."""
