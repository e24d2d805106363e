"""
Client HTTP générique pour les endpoints CRUD de l'API.

Un ApiClient est construit pour une entité (students, subjects, students-subjects)
avec une URL de base explicite. Il expose fetch_all / create / update / remove,
qui envoient respectivement GET, POST, PUT et DELETE sur la même route.

Toute réponse hors 2xx lève ApiError ; les erreurs de transport remontent
telles quelles (httpx.HTTPError). Pas de retry ni de timeout spécifique.
"""

from typing import Any, Optional

import httpx

from app.config import settings

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """Réponse HTTP en échec renvoyée par l'API."""

    def __init__(self, method: str, status_code: int, message: str):
        self.method = method
        self.status_code = status_code
        self.message = message
        super().__init__(f"Erreur {method} ({status_code}) : {message}")


class ApiClient:
    """
    Client CRUD pour une entité.

    - entity : segment de route de l'entité, ex. "students"
    - base_url : racine de l'API (par défaut settings.API_BASE_URL)
    - url_override : URL complète à utiliser à la place de base_url + entité
    - http : client httpx à réutiliser (un TestClient FastAPI convient aussi)

    Sans http, le client httpx est créé ici et fermé par close() ou en sortie
    de bloc with. Un client fourni reste à la charge de l'appelant.
    """

    def __init__(
        self,
        entity: str,
        base_url: Optional[str] = None,
        url_override: Optional[str] = None,
        http: Optional[httpx.Client] = None,
    ):
        self.entity = entity
        if url_override is not None:
            self.url = url_override
        else:
            root = (base_url if base_url is not None else settings.API_BASE_URL).rstrip("/")
            self.url = f"{root}{API_PREFIX}/{entity}"
        self._owns_http = http is None
        self._http = httpx.Client() if http is None else http

    def fetch_all(self) -> list[dict]:
        """GET sans corps : tous les enregistrements de l'entité."""
        response = self._http.get(self.url)
        self._raise_for_status("GET", response)
        return response.json()

    def create(self, data: dict) -> dict:
        return self._send_json("POST", data)

    def update(self, data: dict) -> dict:
        """PUT : data doit contenir l'id de l'enregistrement."""
        return self._send_json("PUT", data)

    def remove(self, record_id: Any) -> dict:
        return self._send_json("DELETE", {"id": record_id})

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send_json(self, method: str, data: dict) -> dict:
        response = self._http.request(method, self.url, json=data)
        self._raise_for_status(method, response)
        return response.json()

    @staticmethod
    def _raise_for_status(method: str, response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = response.json()
        except ValueError:
            body = None
        message = response.text
        if isinstance(body, dict):
            message = body.get("error") or body.get("detail") or message
        raise ApiError(method, response.status_code, str(message))


def students_api(base_url: Optional[str] = None, http: Optional[httpx.Client] = None) -> ApiClient:
    return ApiClient("students", base_url=base_url, http=http)


def subjects_api(base_url: Optional[str] = None, http: Optional[httpx.Client] = None) -> ApiClient:
    return ApiClient("subjects", base_url=base_url, http=http)


def enrollments_api(base_url: Optional[str] = None, http: Optional[httpx.Client] = None) -> ApiClient:
    return ApiClient("students-subjects", base_url=base_url, http=http)
