"""
GPU update checker settings: a self-healing per-user preference store with
interactive provisioning of missing values.
"""

__version__ = "0.1.0"
