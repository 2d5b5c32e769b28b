"""
Image Ledger - Ledger-resident image record manager

A chaincode-style contract that stores, queries, enumerates and transfers
ownership of image metadata records inside a host-provided key-value ledger.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
