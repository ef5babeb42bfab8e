"""
Custom exceptions for SkewTCharts package.

This module defines exception classes for better error handling and messaging
across the package, particularly in the API, sounding loading, and export
workflows.
"""


class SkewTChartsError(Exception):
    """Base exception class for all SkewTCharts errors."""
    pass


class SoundingDataError(SkewTChartsError):
    """
    Raised when sounding data cannot be read or is structurally invalid.
    
    This typically occurs when a sounding file is malformed or a sample is
    missing its pressure value.
    """
    pass


class RenderError(SkewTChartsError):
    """
    Raised when chart rendering fails.
    
    This can occur due to invalid geometry or matplotlib errors while the
    scene is painted or saved.
    """
    pass


class ExportError(SkewTChartsError):
    """
    Raised when a rendered chart cannot be serialized or rasterized.
    
    Export failures are reported to the caller and never abort the render
    pass; the diagram stays usable without an export.
    """
    pass


class InvalidParameterError(SkewTChartsError):
    """
    Raised for invalid user inputs.
    
    This exception is used for parameter validation failures such as
    a skew angle without a usable tangent, empty temperature or pressure
    domains, or non-positive chart dimensions.
    """
    pass
