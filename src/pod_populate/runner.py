from __future__ import annotations

import logging
import os
from typing import Protocol

from .correlation import CorrelationEntry, CorrelationTable, build_correlation_table
from .extractor import read_person
from .models import AccountOutcome, FriendMode, MergeResult, RunReport
from .placement import copy_person_file, put_extra_content
from .profile import ProfileMerger
from .resolver import resolve_friends
from .settings import PopulateSettings

logger = logging.getLogger(__name__)


class Registrar(Protocol):
    async def register(self, account: str) -> bool: ...


class Populator:
    """Creates pods and seeds their profiles, one account at a time.

    Every account is finished (or its failure logged) before the next one
    starts. Only a source directory that cannot be listed stops a run.
    """

    def __init__(
        self,
        settings: PopulateSettings,
        registrar: Registrar,
        merger: ProfileMerger | None = None,
    ):
        self.settings = settings
        self.registrar = registrar
        self.merger = merger or ProfileMerger(settings)

    async def init_pod(
        self, outcome: AccountOutcome, source_dir: str | None = None, person_file: str | None = None
    ) -> bool:
        """Register the pod and drop the person file into it.

        Returns False when the pod directory never appeared.
        """
        account = outcome.account
        if not await self.registrar.register(account):
            outcome.errors.append("registration failed")

        pod_dir = self.settings.pod_dir(account)
        if not os.path.isdir(pod_dir):
            logger.error(f"Failed to create pod for {account}: dir {pod_dir} does not exist!")
            outcome.errors.append("pod dir missing")
            return False
        logger.info(f"Created pod for {account}")
        outcome.created = True

        if source_dir and person_file:
            try:
                copy_person_file(self.settings, account, os.path.join(source_dir, person_file))
            except OSError as e:
                logger.error(f"Copying {person_file} into pod of {account} failed: {e}")
                outcome.errors.append(f"person file copy failed: {e}")
        return True

    def update_profile(
        self,
        outcome: AccountOutcome,
        entry: CorrelationEntry,
        source_dir: str,
        table: CorrelationTable | None = None,
    ) -> None:
        """Merge the name (and, given a table, the LDBC friends) of ``entry``."""
        path = os.path.join(source_dir, entry.source_file)
        try:
            info = read_person(path, entry.source_id, self.settings)
        except Exception as e:
            logger.error(f"Reading {path} failed: {e}")
            outcome.errors.append(f"source unreadable: {e}")
            return
        if info is None:
            outcome.errors.append("incomplete identity")
            return

        person, friend_refs = info
        friends = []
        if table is not None:
            friends, skipped = resolve_friends(friend_refs, FriendMode.LDBC, self.settings, table)
            outcome.errors.extend(f"unresolved friend {ref}" for ref in skipped)

        self._record(outcome, self.merger.merge(entry.account, person, friends))

    def add_dummy_friends(self, outcome: AccountOutcome, accounts: list[str]) -> None:
        """Make ``outcome.account`` know every other account in ``accounts``."""
        others = [a for a in accounts if a != outcome.account]
        friends, skipped = resolve_friends(others, FriendMode.SYNTHETIC, self.settings)
        outcome.errors.extend(f"unresolved friend {ref}" for ref in skipped)
        self._record(outcome, self.merger.merge(outcome.account, None, friends))

    def _record(self, outcome: AccountOutcome, result: MergeResult) -> None:
        if result.ok:
            outcome.merged = True
            outcome.friends_added += result.friends_added
        else:
            outcome.errors.append(result.error or "merge failed")

    async def run_ldbc(self, generated_root: str) -> RunReport:
        source_dir = self.settings.source_data_dir(generated_root)
        table = build_correlation_table(source_dir, self.settings)
        report = RunReport()

        for entry in table.values():
            logger.info(f"file={entry.source_file} pers={entry.source_id} account={entry.account}")
            outcome = report.add(AccountOutcome(account=entry.account, source_id=entry.source_id))
            try:
                if await self.init_pod(outcome, source_dir, entry.source_file):
                    self.update_profile(outcome, entry, source_dir, table)
            except Exception as e:
                logger.exception(f"Populating {entry.account} failed")
                outcome.errors.append(str(e))
        return report

    async def run_full(
        self,
        number: int,
        generated_root: str | None = None,
        extra_root: str | None = None,
    ) -> RunReport:
        """Create ``number`` accounts that all know each other.

        With ``generated_root`` the first ``number`` LDBC persons provide names.
        """
        accounts = [self.settings.account_name(i) for i in range(number)]
        report = RunReport()

        if generated_root:
            source_dir = self.settings.source_data_dir(generated_root)
            table = build_correlation_table(source_dir, self.settings)
            entries: list[CorrelationEntry | None] = list(table.values())[:number]
        else:
            source_dir = None
            entries = [None] * number

        for account, entry in zip(accounts, entries):
            if entry is not None:
                account = entry.account
                logger.info(f"file={entry.source_file} pers={entry.source_id} account={account}")
            outcome = report.add(
                AccountOutcome(account=account, source_id=entry.source_id if entry else None)
            )
            try:
                if not await self.init_pod(
                    outcome, source_dir, entry.source_file if entry else None
                ):
                    continue
                if entry is not None:
                    self.update_profile(outcome, entry, source_dir)
                self.add_dummy_friends(outcome, accounts)
                if extra_root:
                    put_extra_content(self.settings, account, extra_root)
            except Exception as e:
                logger.exception(f"Populating {account} failed")
                outcome.errors.append(str(e))
        return report
