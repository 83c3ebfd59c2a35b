from __future__ import annotations

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def dir_str(value: str) -> str:
    return value if value.endswith("/") else value + "/"


class PopulateSettings(BaseSettings):
    """Run configuration for pod population.

    Environment variables are prefixed with POD_POPULATE_. The CLI builds one
    instance per run and hands it to every component.
    """

    model_config = SettingsConfigDict(env_prefix="POD_POPULATE_", extra="ignore", frozen=True)

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Pod server ---
    base_url: str = Field(default="http://localhost:3000/", description="Base URL of the CSS")
    data_dir: str = Field(default="./data/", description="Data dir of the CSS")
    password: str = Field(default="password")
    http_timeout: float | None = Field(default=None, description="Seconds; None waits forever")
    email_domain: str = Field(default="example.org")
    account_prefix: str = Field(default="user")
    profile_relpath: str = Field(default="profile/card$.ttl")
    profile_fragment: str = Field(default="profile/card#me")

    # --- LDBC source data ---
    ldbc_uri_base: str = Field(default="http://localhost:3000/www.ldbc.eu/ldbc_socialnet/1.0")
    ldbc_fragments_subdir: str = Field(
        default="out-fragments/http/localhost_3000/www.ldbc.eu/ldbc_socialnet/1.0/data/"
    )
    person_file_prefix: str = Field(default="pers")
    person_file_suffix: str = Field(default=".nq")

    @field_validator("base_url", "data_dir", "ldbc_fragments_subdir")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        return dir_str(v)

    @field_validator("ldbc_uri_base")
    @classmethod
    def _no_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def account_name(self, index: int) -> str:
        return f"{self.account_prefix}{index}"

    def pod_dir(self, account: str) -> str:
        return f"{self.data_dir}{account}"

    def profile_path(self, account: str) -> str:
        """Path of the account's WebID profile inside the CSS data dir."""
        return f"{self.data_dir}{account}/{self.profile_relpath}"

    def profile_uri(self, account: str) -> str:
        """WebID of the account, e.g. ``http://localhost:3000/user0/profile/card#me``."""
        return f"{self.base_url}{account}/{self.profile_fragment}"

    def profile_document_uri(self, account: str) -> str:
        return self.profile_uri(account).split("#", 1)[0]

    def register_url(self) -> str:
        return f"{self.base_url}idp/register/"

    def ldbc_person_uri(self, source_id: str) -> str:
        return f"{self.ldbc_uri_base}/data/{source_id}"

    def ldbc_vocab(self, term: str) -> str:
        return f"{self.ldbc_uri_base}/vocabulary/{term}"

    def source_data_dir(self, generated_root: str) -> str:
        """Directory holding the per-person fragment files of a generated dataset."""
        return os.path.join(dir_str(generated_root), self.ldbc_fragments_subdir)

    def is_person_file(self, filename: str) -> bool:
        return filename.startswith(self.person_file_prefix) and filename.endswith(
            self.person_file_suffix
        )
