"""Cardano dApp transaction collector API"""
