"""Line-oriented text tools: tail, uniq, wc and a small line template renderer."""

__version__ = "0.1.0"