"""
Pre-processing of the experimental inputs: flux and exposure time to gel size.
"""
