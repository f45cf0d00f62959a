"""Kernel – error types shared by every kblog layer."""
