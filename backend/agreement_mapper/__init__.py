"""
PDF agreement field mapper.

Turns onboarding applications (individual, proprietorship, partnership,
company) into the flat field dictionaries bound onto the agreement PDF
template.
"""

__version__ = "0.1.0"
