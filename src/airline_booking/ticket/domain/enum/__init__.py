from .fare_class import FareClass

__all__ = ["FareClass"]
