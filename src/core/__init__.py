"""
Core domain models and wire contracts of the PMML runtime.

This module contains the building blocks that are independent of the model
store and of concrete scoring executors.
"""
