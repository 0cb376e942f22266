"""
Shared Firestore client construction for the catalog and request stores.

Both stores talk to Firestore through google.cloud.firestore.AsyncClient built from a
service account file. project_id falls back to the one recorded in the credentials file.
"""

import json
from pathlib import Path
from typing import Optional, Union

from google.cloud.firestore import AsyncClient
from google.oauth2 import service_account


def project_id_from_credentials_file(credentials_path: Union[Path, str]) -> Optional[str]:
    """Read project_id from a Google service account JSON file if present."""
    path = Path(credentials_path)
    if not path.is_file():
        return None
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        return None
    return data.get("project_id") or data.get("projectId")


def create_async_client(
    project_id: Optional[str] = None,
    credentials_path: Optional[Union[Path, str]] = None,
) -> AsyncClient:
    """AsyncClient from a service account file; raises ValueError when no file is given."""
    if not credentials_path:
        raise ValueError("Firestore stores require credentials_path (service account JSON)")
    resolved = str(Path(credentials_path).resolve())
    creds = service_account.Credentials.from_service_account_file(resolved)
    project = project_id or project_id_from_credentials_file(resolved)
    return AsyncClient(project=project, credentials=creds)
