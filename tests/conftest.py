"""
Fixtures compartilhadas para testes.

Os testes de integração falam com um CMS falso (uma app FastAPI em memória)
através de httpx.ASGITransport, sem rede.
"""

import math
from typing import Optional

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vitrine.api_client import APIClient
from vitrine.core.storage import MemoryTokenStore
from vitrine.services.session import SessionManager

BASE_URL = "http://test/wp-json/vitrine/v1"
VALID_TOKEN = "token-valido"
ADMIN_TOKEN = "token-admin"


# ==========================================
# Event loop configuration
# ==========================================

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Dados de exemplo
# ==========================================

def make_user(user_id: int = 7, role: str = "subscriber") -> dict:
    """Usuário no formato de GET /auth/me."""
    return {
        "id": user_id,
        "email": "ana@example.com",
        "nome": "Ana Souza",
        "role": role,
        "tem_perfil": True,
        "perfil_status": "publish",
        "perfil_id": 42,
        "plano": "premium",
        "slug": None,
    }


def make_listing(listing_id: int) -> dict:
    """Anúncio no formato da listagem pública (com nulls, como o CMS envia)."""
    return {
        "id": listing_id,
        "slug": f"anuncio-{listing_id}",
        "nome": f"Anúncio {listing_id}",
        "idade": None,
        "headline": "",
        "cidade": "Rio de Janeiro",
        "cidade_slug": "rio-de-janeiro",
        "estado": "RJ",
        "bairro": None,
        "categoria": "Mulheres",
        "categoria_slug": "mulheres",
        "valor_hora": 300,
        "foto_principal": f"https://cdn.test/{listing_id}.jpg",
        "foto_thumbnail": None,
        "verificada": listing_id % 2 == 0,
        "online": False,
        "destaque": False,
        "plano": None,
        "atende_local": True,
    }


def make_detail(listing_id: int = 42) -> dict:
    """Anúncio completo, como em GET /acompanhante/{slug}."""
    data = make_listing(listing_id)
    data.update(
        {
            "descricao": "Atendimento discreto.",
            "whatsapp": "21999999999",
            "telefone": "",
            "altura": 168,
            "peso": None,
            "valor_meia_hora": None,
            "valor_pernoite": 1500,
            "aceita_cartao": False,
            "aceita_pix": True,
            "servicos": [{"id": 3, "nome": "Jantar", "slug": "jantar"}],
            "galeria": [
                {"id": 101, "thumbnail": "t1", "medium": "m1", "large": "l1", "full": "f1"},
                {"id": 102, "thumbnail": "t2", "medium": "m2", "large": "l2", "full": "f2"},
            ],
            "views": 120,
        }
    )
    return data


def make_owned(listing_id: int = 42) -> dict:
    """Anúncio do próprio anunciante, como em GET /meu-perfil."""
    data = make_detail(listing_id)
    data.update(
        {
            "status": "pending",
            "data_nascimento": "1995-04-10",
            "cidade_id": 10,
            "bairro_id": None,
            "categoria_id": 2,
            "servicos_ids": [3, 5],
            "whatsapp_clicks": 4,
            "phone_clicks": 1,
            "favoritos": 2,
        }
    )
    return data


# ==========================================
# CMS falso
# ==========================================

class FakeCMS:
    """
    Backend em memória com as rotas REST usadas pelo cliente.

    Guarda as requisições recebidas para os testes inspecionarem.
    """

    def __init__(self):
        self.total_listings = 37
        self.track_fails = False
        self.profile: Optional[dict] = make_owned()
        self.calls: list[tuple[str, str]] = []
        self.last_params: dict = {}
        self.last_body: Optional[dict] = None
        self.tracked: list[dict] = []
        self.uploaded: list[str] = []
        self.next_photo_id = 500
        self.app = self._build_app()

    def _token(self, request: Request) -> Optional[str]:
        auth = request.headers.get("authorization", "")
        return auth.removeprefix("Bearer ") or None

    def _authorized(self, request: Request) -> bool:
        return self._token(request) in (VALID_TOKEN, ADMIN_TOKEN)

    def _build_app(self) -> FastAPI:
        app = FastAPI()
        cms = self
        prefix = "/wp-json/vitrine/v1"

        def denied():
            return JSONResponse(
                status_code=401,
                content={"code": "rest_forbidden", "message": "Token inválido"},
            )

        @app.middleware("http")
        async def record(request: Request, call_next):
            cms.calls.append((request.method, request.url.path.removeprefix(prefix)))
            return await call_next(request)

        # Auth

        @app.post(f"{prefix}/auth/login")
        async def login(request: Request):
            body = await request.json()
            if body.get("email") == "ana@example.com" and body.get("password") == "segredo123":
                return {"success": True, "token": VALID_TOKEN, "user": make_user()}
            return JSONResponse(
                status_code=401,
                content={"success": False, "message": "E-mail ou senha incorretos"},
            )

        @app.post(f"{prefix}/auth/register")
        async def register(request: Request):
            cms.last_body = await request.json()
            user = make_user()
            user.update({"nome": cms.last_body["nome"], "tem_perfil": False, "perfil_status": None})
            return {"success": True, "message": "Conta criada", "token": VALID_TOKEN, "user": user}

        @app.get(f"{prefix}/auth/me")
        async def me(request: Request):
            token = cms._token(request)
            if token == ADMIN_TOKEN:
                return make_user(1, role="administrator")
            if token == VALID_TOKEN:
                return make_user()
            return denied()

        @app.post(f"{prefix}/auth/forgot-password")
        async def forgot_password(request: Request):
            return {"success": True, "message": "E-mail enviado"}

        # Listagem pública

        @app.get(f"{prefix}/acompanhantes")
        async def listings(request: Request):
            params = dict(request.query_params)
            cms.last_params = params
            page = int(params.get("page", 1))
            per_page = int(params.get("per_page", 12))
            start = (page - 1) * per_page
            ids = range(1, cms.total_listings + 1)[start:start + per_page]
            return {
                "data": [make_listing(i) for i in ids],
                "total": cms.total_listings,
                "pages": math.ceil(cms.total_listings / per_page),
                "current_page": page,
            }

        @app.get(f"{prefix}/acompanhante/{{slug}}")
        async def listing_detail(slug: str):
            if slug != "anuncio-42":
                return JSONResponse(status_code=404, content={"message": "Perfil não encontrado"})
            return make_detail(42)

        @app.post(f"{prefix}/acompanhante/{{listing_id}}/track")
        async def track(listing_id: int, request: Request):
            if cms.track_fails:
                return JSONResponse(status_code=500, content={"message": "Erro interno"})
            body = await request.json()
            cms.tracked.append({"id": listing_id, **body})
            return {"success": True}

        # Taxonomias

        @app.get(f"{prefix}/cidades")
        async def cities():
            return [
                {"id": 10, "nome": "Rio de Janeiro", "slug": "rio-de-janeiro", "count": 30},
                {"id": 11, "nome": "Niterói", "slug": "niteroi", "count": 7},
            ]

        @app.get(f"{prefix}/categorias")
        async def categories():
            return [{"id": 2, "nome": "Mulheres", "slug": "mulheres", "count": 37}]

        @app.get(f"{prefix}/servicos")
        async def services():
            return [{"id": 3, "nome": "Jantar", "slug": "jantar"}, {"id": 5, "nome": "Viagem", "slug": "viagem"}]

        @app.get(f"{prefix}/bairros")
        async def neighborhoods(request: Request):
            cms.last_params = dict(request.query_params)
            return [{"id": 20, "nome": "Copacabana", "slug": "copacabana"}]

        # Área do anunciante

        @app.get(f"{prefix}/meu-perfil")
        async def my_profile(request: Request):
            if not cms._authorized(request):
                return denied()
            if cms.profile is None:
                return {"existe": False, "perfil": None}
            return {"existe": True, "perfil": cms.profile}

        @app.post(f"{prefix}/meu-perfil")
        async def save_profile(request: Request):
            if not cms._authorized(request):
                return denied()
            cms.last_body = await request.json()
            return {"success": True, "message": "Perfil salvo", "perfil_id": 42}

        @app.post(f"{prefix}/upload")
        async def upload(request: Request):
            if not cms._authorized(request):
                return denied()
            body = await request.body()
            if b'name="foto"' not in body:
                return JSONResponse(status_code=400, content={"message": "Nenhuma foto enviada"})
            cms.next_photo_id += 1
            cms.uploaded.append(request.headers.get("content-type", ""))
            photo_id = cms.next_photo_id
            return {
                "success": True,
                "id": photo_id,
                "url": f"https://cdn.test/{photo_id}.jpg",
                "sizes": {"thumbnail": f"https://cdn.test/{photo_id}-150.jpg"},
            }

        @app.delete(f"{prefix}/upload/{{photo_id}}")
        async def delete_photo(photo_id: int, request: Request):
            if not cms._authorized(request):
                return denied()
            return {"success": True}

        @app.get(f"{prefix}/dashboard/stats")
        async def dashboard(request: Request):
            if not cms._authorized(request):
                return denied()
            return {
                "tem_perfil": True,
                "perfil_status": "publish",
                "plano": "vip",
                "plano_expira": "2026-12-01",
                "dias_restantes": 43,
                "stats": {
                    "views": 200,
                    "whatsapp_clicks": 15,
                    "phone_clicks": 5,
                    "favoritos": 9,
                    "taxa_conversao": 10.0,
                },
            }

        # Planos e pagamento

        @app.get(f"{prefix}/planos")
        async def plans():
            return [
                {"id": "premium", "nome": "Premium", "preco": 99.9, "duracao_dias": 30, "beneficios": ["Destaque"]},
                {"id": "vip", "nome": "VIP", "preco": 199.9, "duracao_dias": 30, "beneficios": []},
            ]

        @app.post(f"{prefix}/pagamento/criar")
        async def create_payment(request: Request):
            if not cms._authorized(request):
                return denied()
            body = await request.json()
            if body.get("plano") == "vip":
                return {"success": True, "preference_id": "pref-1", "init_point": "https://pay.test/checkout/pref-1"}
            return {"success": False, "message": "Plano inválido"}

        # Moderação

        @app.get(f"{prefix}/admin/pendentes")
        async def pending(request: Request):
            if cms._token(request) != ADMIN_TOKEN:
                return JSONResponse(status_code=403, content={"message": "Acesso negado"})
            return {"pendentes": [make_owned(42), make_owned(43)]}

        @app.post(f"{prefix}/admin/aprovar/{{listing_id}}")
        async def approve(listing_id: int, request: Request):
            if cms._token(request) != ADMIN_TOKEN:
                return JSONResponse(status_code=403, content={"message": "Acesso negado"})
            return {"success": True, "message": "Perfil aprovado"}

        @app.post(f"{prefix}/admin/reprovar/{{listing_id}}")
        async def reject(listing_id: int, request: Request):
            if cms._token(request) != ADMIN_TOKEN:
                return JSONResponse(status_code=403, content={"message": "Acesso negado"})
            cms.last_body = await request.json()
            return {"success": True, "message": "Perfil reprovado"}

        return app


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
def cms() -> FakeCMS:
    """CMS falso novo a cada teste."""
    return FakeCMS()


@pytest.fixture
def api(cms: FakeCMS) -> APIClient:
    """Cliente apontado para o CMS falso via ASGITransport."""
    return APIClient(base_url=BASE_URL, transport=httpx.ASGITransport(app=cms.app))


# ==========================================
# Session fixtures
# ==========================================

@pytest.fixture
def session(api: APIClient) -> SessionManager:
    """Sessão anônima."""
    return SessionManager(api, MemoryTokenStore())


@pytest.fixture
async def logged_session(api: APIClient) -> SessionManager:
    """Sessão autenticada como anunciante."""
    manager = SessionManager(api, MemoryTokenStore(VALID_TOKEN))
    await manager.restore()
    return manager


@pytest.fixture
async def admin_session(api: APIClient) -> SessionManager:
    """Sessão autenticada como administrador."""
    manager = SessionManager(api, MemoryTokenStore(ADMIN_TOKEN))
    await manager.restore()
    return manager


@pytest.fixture
def owned_listing_data() -> dict:
    """Anúncio do anunciante no formato de GET /meu-perfil."""
    return make_owned()
