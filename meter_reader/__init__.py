"""
Meter Reader root package.

REST backend that registers water and gas meter readings submitted as
photographs, reads the value with a Gemini vision model, stores it in
MongoDB and lets a person confirm the value once.
"""
