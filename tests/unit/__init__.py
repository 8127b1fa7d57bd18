"""
Unit tests package.

Contains unit tests for individual modules and functions in isolation.
Date-dependent properties are tested through their ``*_on(date)`` variants
or by patching ``egypt_nid.national_id._today``.
"""
