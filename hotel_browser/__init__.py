"""Hotel Browser - hotel search API with an infinite-scroll listing."""

__version__ = "0.1.0"
