"""
Web Package

External web collaborators used by the research pipeline.
"""
