"""Visitor OCR.

Extracts a visitor's name and ID number from ID-card captures and a plate
number from license-plate captures, using Tesseract OCR followed by
line-scoring heuristics tuned for noisy camera images.
"""

__version__ = "1.0.0"
