"""
WellnessHub: wellness platform backend

Consumer and practitioner profiles, a practitioner directory, blog posts with
embeddings, and appointment booking against weekly availability templates.
"""

__version__ = "0.1.0"
__author__ = "WellnessHub Team"
__description__ = "Wellness platform backend"
