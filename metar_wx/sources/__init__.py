from .avwx import AviationWeatherSource

__all__ = ['AviationWeatherSource']
