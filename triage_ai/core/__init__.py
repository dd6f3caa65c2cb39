"""
Core algorithms: department recommendation and fairness audit.
"""
