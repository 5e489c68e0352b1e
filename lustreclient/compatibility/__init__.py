"""
Compatibility table and lookup for the Lustre client installer.

Public exports:
    CompatibilityRule, VersionMatch, KernelMatch, RuleAction: Rule types
    CompatibilityTable, COMPATIBILITY_TABLE: The supported combinations
    resolve: Function selecting the rule for a SystemProfile
    compare_versions, version_at_least, has_prefix: Version ordering helpers
"""

from lustreclient.compatibility.models import (
    CompatibilityRule,
    KernelMatch,
    RuleAction,
    VersionMatch,
)
from lustreclient.compatibility.table import COMPATIBILITY_TABLE, CompatibilityTable
from lustreclient.compatibility.resolver import resolve
from lustreclient.compatibility.versions import compare_versions, has_prefix, version_at_least

__all__ = [
    "CompatibilityRule",
    "KernelMatch",
    "RuleAction",
    "VersionMatch",
    "COMPATIBILITY_TABLE",
    "CompatibilityTable",
    "resolve",
    "compare_versions",
    "has_prefix",
    "version_at_least",
]
