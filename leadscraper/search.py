"""
Ask the generative-search backend for leads and parse the answer.

The model answers in prose; `parse_leads` does the heavy lifting. This
module only builds the prompt, makes the call, caches raw answers and
translates client failures into SearchServiceError.
"""

from typing import Any, Optional

from openai import OpenAI

from .cache import cache_get_json, cache_set_json
from .config import config
from .errors import wrap_openai_error
from .extract import labels_for, parse_leads
from .logging import get_logger
from .types import LeadRecord, SearchRequest

logger = get_logger(__name__)

PROMPT_VERSION = "v2"  # bump when the prompt changes (invalidates cache)


PROMPT_TEMPLATE_ES = """
Actúa como un experto en extracción de datos.
Busca {more}negocios del tipo "{business_type}" en "{location}, {country}".

IMPORTANTE: Solo devuelve negocios que estén REALMENTE en {country}.
{coords_hint}
Para cada negocio, proporciona la siguiente información en este formato exacto de lista para que pueda procesarlo:
- Nombre: [Nombre del negocio]
- Calificación: [Estrellas o N/A]
- Reseñas: [Número de reseñas o N/A]
- Dirección: [Dirección completa]
- Teléfono: [Número de teléfono o N/A]
- URL: [URL de Google Maps]

Trae al menos 15-20 resultados detallados.
""".strip()

PROMPT_TEMPLATE_EN = """
Act as a data extraction expert.
Find {more}businesses of type "{business_type}" in "{location}, {country}".

IMPORTANT: Only return businesses that are ACTUALLY located in {country}.
{coords_hint}
For each business, give the following information in this exact list format so it can be processed:
- Name: [Business name]
- Rating: [Stars or N/A]
- Reviews: [Number of reviews or N/A]
- Address: [Full address]
- Phone: [Phone number or N/A]
- URL: [Google Maps URL]

Return at least 15-20 detailed results.
""".strip()

_PROMPTS = {"es": PROMPT_TEMPLATE_ES, "en": PROMPT_TEMPLATE_EN}


_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """Shared OpenAI client, created on first use (reads OPENAI_API_KEY)."""
    global _client
    if _client is None:
        _client = OpenAI(api_key=config.OPENAI_API_KEY or None)
    return _client


def build_prompt(request: SearchRequest, more: bool = False, language: Optional[str] = None) -> str:
    lang = (language or config.LEADS_LANGUAGE or "es").strip().lower()
    template = _PROMPTS.get(lang, PROMPT_TEMPLATE_ES)
    english = template is PROMPT_TEMPLATE_EN

    coords_hint = ""
    if request.coords is not None:
        lat, lng = request.coords.lat, request.coords.lng
        if english:
            coords_hint = f"The user is near coordinates {lat:.4f}, {lng:.4f}; prefer nearby businesses when relevant.\n"
        else:
            coords_hint = f"El usuario se encuentra cerca de las coordenadas {lat:.4f}, {lng:.4f}; prioriza negocios cercanos si aplica.\n"

    if more:
        more_word = "more " if english else "más "
    else:
        more_word = ""

    return template.format(
        more=more_word,
        business_type=request.business_type.strip(),
        location=request.location.strip(),
        country=request.country,
        coords_hint=coords_hint,
    )


def _tools() -> list[dict[str, Any]]:
    if not config.USE_WEB_SEARCH:
        return []
    return [
        {
            "type": "web_search_preview",
            "user_location": {"type": "approximate", "country": config.LEADS_COUNTRY_CODE},
        }
    ]


def fetch_leads_text(
    request: SearchRequest,
    more: bool = False,
    client: Optional[OpenAI] = None,
    use_cache: bool = True,
) -> str:
    """
    One call to the Responses API. Returns the raw answer text ("" if the
    model said nothing). Raises SearchServiceError if the call fails.
    """
    prompt = build_prompt(request, more=more)
    cache_key = f"leads::{PROMPT_VERSION}::{config.OPENAI_MODEL}::{prompt}"

    if use_cache:
        cached = cache_get_json(config.CACHE_DIR, cache_key)
        if cached and isinstance(cached.get("text"), str):
            logger.info("search_cache_hit", business_type=request.business_type, location=request.location)
            return cached["text"]

    kwargs: dict[str, Any] = {"model": config.OPENAI_MODEL, "input": prompt}
    tools = _tools()
    if tools:
        kwargs["tools"] = tools

    logger.info(
        "search_request",
        business_type=request.business_type,
        location=request.location,
        more=more,
        model=config.OPENAI_MODEL,
    )
    try:
        client = client or get_client()
        resp = client.responses.create(**kwargs)
    except Exception as e:
        raise wrap_openai_error(
            e,
            {"business_type": request.business_type, "location": request.location, "more": more},
        ) from e

    text = (getattr(resp, "output_text", "") or "").strip()

    if use_cache and text:
        # best effort: an unwritable cache must not cost us the answer
        try:
            cache_set_json(config.CACHE_DIR, cache_key, {"prompt": prompt, "model": config.OPENAI_MODEL, "text": text})
        except OSError as e:
            logger.warning("cache_write_failed", cache_dir=config.CACHE_DIR, error=str(e))

    return text


def find_leads(
    request: SearchRequest,
    more: bool = False,
    client: Optional[OpenAI] = None,
    use_cache: bool = True,
) -> list[LeadRecord]:
    """Search -> parse. "Load more" callers should pass use_cache=False."""
    text = fetch_leads_text(request, more=more, client=client, use_cache=use_cache)
    leads = parse_leads(text, labels_for(config.LEADS_LANGUAGE))
    logger.info("leads_parsed", count=len(leads), chars=len(text))
    return leads
