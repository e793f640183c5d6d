"""HTML pages for browsing and creating wallet sets and wallets."""

from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from walletdesk.config import get_settings
from walletdesk.web import samples
from walletdesk.web.client import LocalApiClient
from walletdesk.web.contracts.blockchains import chain_label, get_chain_options
from walletdesk.web.views import WalletSetPage, WalletSetsPage

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.filters["chain_label"] = chain_label

router = APIRouter()


async def get_local_api(request: Request) -> AsyncIterator[LocalApiClient]:
    """API client bound to this application."""
    api = LocalApiClient.for_app(request.app, get_settings().local_api_url)
    try:
        yield api
    finally:
        await api.aclose()


def _render_wallet_sets(request: Request, page: WalletSetsPage) -> HTMLResponse:
    return templates.TemplateResponse(request, "wallet_sets.html", {"page": page})


def _render_wallet_set(request: Request, page: WalletSetPage) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "wallets.html",
        {
            "page": page,
            "chains": get_chain_options(get_settings().testnet),
        },
    )


@router.get("/")
async def homepage():
    return RedirectResponse("/wallet-sets")


@router.get("/wallet-sets", response_class=HTMLResponse)
async def wallet_sets_page(request: Request, api: LocalApiClient = Depends(get_local_api)):
    page = WalletSetsPage(api)
    await page.mount()
    return _render_wallet_sets(request, page)


@router.post("/wallet-sets", response_class=HTMLResponse)
async def submit_wallet_set(
    request: Request,
    name: str = Form(""),
    api: LocalApiClient = Depends(get_local_api),
):
    page = WalletSetsPage(api)
    await page.mount()
    await page.create_form.submit({"name": name})
    return _render_wallet_sets(request, page)


@router.get("/wallets/{wallet_set_id}", response_class=HTMLResponse)
async def wallet_set_page(
    request: Request,
    wallet_set_id: str,
    api: LocalApiClient = Depends(get_local_api),
):
    page = WalletSetPage(api, wallet_set_id)
    await page.mount()
    return _render_wallet_set(request, page)


@router.post("/wallets/{wallet_set_id}", response_class=HTMLResponse)
async def submit_wallet(
    request: Request,
    wallet_set_id: str,
    blockchain: str = Form(""),
    name: str = Form(""),
    description: Optional[str] = Form(None),
    api: LocalApiClient = Depends(get_local_api),
):
    page = WalletSetPage(api, wallet_set_id)
    await page.mount()

    form = {"walletSetId": wallet_set_id, "blockchain": blockchain, "name": name}
    if description:
        form["description"] = description
    await page.create_form.submit(form)
    return _render_wallet_set(request, page)


@router.get("/test", response_class=HTMLResponse)
async def components_page(request: Request):
    """Renders every component with sample data."""
    return templates.TemplateResponse(
        request,
        "components.html",
        {
            "wallet": samples.SAMPLE_WALLET,
            "wallet_set": samples.SAMPLE_WALLET_SET,
            "balance": samples.SAMPLE_BALANCE,
            "token": samples.SAMPLE_TOKEN,
            "transaction": samples.SAMPLE_TRANSACTION,
            "chains": get_chain_options(get_settings().testnet),
        },
    )
