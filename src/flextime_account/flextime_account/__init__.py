"""Flex-time account package.

This package is organized by feature modules (attendance, accrual, policy,
download, ...) with a pure calculation core and thin service/IO layers around it.
"""
