"""
The compatibility table.

Rules are grouped by distribution family. Within a family, rules are listed
from the most specific kernel to the least, and the first rule that accepts
the running kernel wins. Hard rejects are listed first and win regardless of
the kernel.
"""

from typing import Dict, Iterable, List, Tuple

from lustreclient.compatibility.models import CompatibilityRule, KernelMatch, RuleAction, VersionMatch
from lustreclient.environment.os_detect import AMAZON_LINUX_1_VERSION, Arch, DistroFamily

DEBIAN = DistroFamily.DEBIAN
AMAZON = DistroFamily.AMAZON_LINUX
EL = DistroFamily.ENTERPRISE_LINUX
SUSE = DistroFamily.SUSE

REWRITE = RuleAction.REWRITE_REPO_THEN_PROCEED

UBUNTU_CODENAMES = {
    "22.04": "jammy",
    "20.04": "focal",
    "18.04": "bionic",
}

EL9_VERSIONS = VersionMatch.any_of("9.0", "9.3", "9.4")
EL8_VERSIONS = VersionMatch.any_of("8", "8.2", "8.3", "8.4", "8.5", "8.6", "8.7", "8.8", "8.9", "8.10")
EL7_VERSIONS = VersionMatch.any_of("7", "7.7", "7.8", "7.9")

# EL 8 kernel stream to the minor release repository built against it
EL8_KERNEL_REVISIONS = [
    ("4.18.0-513", "8.9"),
    ("4.18.0-477", "8.8"),
    ("4.18.0-425", "8.7"),
    ("4.18.0-372", "8.6"),
    ("4.18.0-348", "8.5"),
    ("4.18.0-305", "8.4"),
    ("4.18.0-240", "8.3"),
    ("4.18.0-193", "8.2"),
]


def _ubuntu_rules() -> List[CompatibilityRule]:
    # The kernel is accepted when the repository carries a module package for it
    return [
        CompatibilityRule(DEBIAN, VersionMatch.exactly(version), KernelMatch.any(), repo_revision=codename)
        for version, codename in UBUNTU_CODENAMES.items()
    ]


def _amazon_rules() -> List[CompatibilityRule]:
    al2 = VersionMatch.exactly("2")
    return [
        CompatibilityRule(AMAZON, VersionMatch.exactly("2023"), KernelMatch.at_least("6.1.79-99.167.amzn2023")),
        CompatibilityRule(AMAZON, al2, KernelMatch.at_least("5.10.144-127.601.amzn2")),
        CompatibilityRule(AMAZON, al2, KernelMatch.at_least("5.4.214-120.368.amzn2")),
        CompatibilityRule(AMAZON, al2, KernelMatch.at_least("4.14.294-220.533.amzn2")),
        CompatibilityRule(AMAZON, VersionMatch.matching(AMAZON_LINUX_1_VERSION.pattern),
                          KernelMatch.at_least("4.14.104-78.84.amzn1.x86_64")),
    ]


def _el9_rules() -> List[CompatibilityRule]:
    return [
        CompatibilityRule(EL, EL9_VERSIONS, KernelMatch.starting_with("5.14.0-427")),
        CompatibilityRule(EL, EL9_VERSIONS, KernelMatch.starting_with("5.14.0-362.18.1"), REWRITE,
                          repo_revision="9.3", repo_token="9"),
        CompatibilityRule(EL, EL9_VERSIONS, KernelMatch.starting_with("5.14.0-70"), REWRITE,
                          repo_revision="9.0", repo_token="9"),
    ]


def _el8_rules() -> List[CompatibilityRule]:
    rules = [
        CompatibilityRule(EL, VersionMatch.any_of("8.2", "8.3"), KernelMatch.any(), RuleAction.REJECT,
                          distro_ids=("rocky",),
                          reason="Rocky Linux 8.2 and 8.3 are not supported for Lustre client"),
        CompatibilityRule(EL, EL8_VERSIONS, KernelMatch.starting_with("4.18.0-553")),
    ]
    rules.extend(
        CompatibilityRule(EL, EL8_VERSIONS, KernelMatch.starting_with(kernel), REWRITE,
                          repo_revision=revision, repo_token="8")
        for kernel, revision in EL8_KERNEL_REVISIONS
    )
    return rules


def _el7_rules() -> List[CompatibilityRule]:
    x86, arm = Arch.X86_64, Arch.AARCH64
    return [
        CompatibilityRule(EL, VersionMatch.exactly("7.7"), KernelMatch.any(), RuleAction.REJECT, arch=arm,
                          reason="ARM architecture is not supported for (RHEL, CentOS) based system version 7.7"),
        CompatibilityRule(EL, EL7_VERSIONS, KernelMatch.starting_with("3.10.0-1160"), arch=x86),
        CompatibilityRule(EL, EL7_VERSIONS, KernelMatch.starting_with("3.10.0-1127"), REWRITE, arch=x86,
                          repo_revision="7.8", repo_token="7"),
        CompatibilityRule(EL, EL7_VERSIONS, KernelMatch.starting_with("3.10.0-1062"), REWRITE, arch=x86,
                          repo_revision="7.7", repo_token="7"),
        CompatibilityRule(EL, EL7_VERSIONS, KernelMatch.starting_with("4.18.0-193"), arch=arm),
        CompatibilityRule(EL, EL7_VERSIONS, KernelMatch.starting_with("4.18.0-147"), REWRITE, arch=arm,
                          repo_revision="7.8", repo_token="7"),
    ]


def _suse_rules() -> List[CompatibilityRule]:
    return [
        CompatibilityRule(SUSE, VersionMatch.exactly("12.3"), KernelMatch.any(), REWRITE,
                          repo_revision="SP3", repo_token="SLES-12"),
        CompatibilityRule(SUSE, VersionMatch.exactly("12.4"), KernelMatch.any(), REWRITE,
                          repo_revision="SP4", repo_token="SLES-12", migrate_from="SP3"),
        CompatibilityRule(SUSE, VersionMatch.exactly("12.5"), KernelMatch.any(),
                          repo_token="SLES-12", migrate_from="SP4"),
    ]


class CompatibilityTable:
    """Ordered compatibility rules, looked up by distribution family."""

    def __init__(self, rules: Iterable[CompatibilityRule]):
        self._rules: Dict[DistroFamily, Tuple[CompatibilityRule, ...]] = {}
        for rule in rules:
            self._rules[rule.distro_family] = self._rules.get(rule.distro_family, ()) + (rule,)

    def rules_for(self, family: DistroFamily) -> Tuple[CompatibilityRule, ...]:
        return self._rules.get(family, ())

    def families(self) -> List[DistroFamily]:
        return list(self._rules)

    def __len__(self):
        return sum(len(rules) for rules in self._rules.values())


COMPATIBILITY_TABLE = CompatibilityTable(
    _ubuntu_rules()
    + _amazon_rules()
    + _el9_rules()
    + _el8_rules()
    + _el7_rules()
    + _suse_rules()
)
