"""
Address -> Coordinates resolution for scheduled routines.

Two interchangeable geocoders share one async contract:
`resolve(addresses)` returns a list positionally aligned with the input,
holding None for blank or unresolvable addresses.

- MockGeocoder: deterministic hash-based points inside a city's bounds (offline, default).
- GeminiGeocoder: asks a Gemini model for the coordinates in one batched request.
"""

import os
import re
import json
import asyncio
import logging
from typing import Any, List, Optional, Protocol, Sequence

import google.generativeai as genai
from pydantic import BaseModel, ValidationError

from models import Coordinates

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    async def resolve(self, addresses: Sequence[str]) -> List[Optional[Coordinates]]:
        ...


class CityBounds(BaseModel):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


# Puerto Peñasco urban area, kept clear of the water
PUERTO_PENASCO = CityBounds(min_lat=31.315, max_lat=31.335, min_lon=-113.545, max_lon=-113.525)


def address_hash(address: str) -> int:
    """31-multiplier string hash folded to a signed 32-bit int, then made positive."""
    h = 0
    for ch in address:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class MockGeocoder:
    """
    Offline geocoder: the same address always lands on the same point.
    """

    def __init__(self, bounds: CityBounds = PUERTO_PENASCO, latency_seconds: float = 0.0):
        self.bounds = bounds
        self.latency_seconds = latency_seconds

    def locate(self, address: str) -> Optional[Coordinates]:
        if not address or not address.strip():
            return None

        h = address_hash(address.lower())
        lat_offset = (h % 1000) / 1000
        lon_offset = ((h >> 10) % 1000) / 1000

        b = self.bounds
        return Coordinates(
            lat=b.min_lat + lat_offset * (b.max_lat - b.min_lat),
            lon=b.min_lon + lon_offset * (b.max_lon - b.min_lon)
        )

    async def resolve(self, addresses: Sequence[str]) -> List[Optional[Coordinates]]:
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)
        return [self.locate(address) for address in addresses]


class GeminiGeocoder:
    """
    LLM-backed geocoder. Only non-blank addresses are sent; one request per batch.
    """

    def __init__(self, api_key: str | None = None, model_name: str = "gemini-2.5-flash", city_hint: str = ""):
        self.api_key = api_key or os.environ.get("GOOGLE_API_KEY")
        if not self.api_key:
            raise ValueError("GOOGLE_API_KEY not found. Please set it in environment.")

        genai.configure(api_key=self.api_key)
        self.model = genai.GenerativeModel(model_name)
        self.city_hint = city_hint

    def _build_prompt(self, addresses: List[str]) -> str:
        numbered = "\n".join(f"{i}. {a}" for i, a in enumerate(addresses))
        context = f" All addresses are in or near {self.city_hint}." if self.city_hint else ""
        return f"""
        Geocode the following {len(addresses)} street addresses.{context}

        OUTPUT FORMAT:
        A single valid JSON Array with exactly {len(addresses)} items, in the same order.
        Each item is {{"lat": <float>, "lon": <float>}} or null if the address cannot be located.

        ADDRESSES:
        {numbered}
        """

    @staticmethod
    def _robust_parse_json(raw_text: str) -> List[Any]:
        """Handles Markdown fences and stray text around the JSON array."""
        if not raw_text:
            return []

        clean_text = re.sub(r"```json\s*|\s*```", "", raw_text).strip()
        try:
            data = json.loads(clean_text)
        except json.JSONDecodeError:
            match = re.search(r"(\[.*\])", clean_text, re.DOTALL)
            if not match:
                return []
            try:
                data = json.loads(match.group(1))
            except json.JSONDecodeError:
                return []

        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in ["coordinates", "results", "result"]:
                if key in data and isinstance(data[key], list):
                    return data[key]
        return []

    @staticmethod
    def _to_coordinates(items: List[Any], count: int) -> List[Optional[Coordinates]]:
        coords: List[Optional[Coordinates]] = []
        for i in range(count):
            item = items[i] if i < len(items) else None
            if not isinstance(item, dict):
                coords.append(None)
                continue
            try:
                coords.append(Coordinates(**item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid coordinates for item {i}: {e.json()}")
                coords.append(None)
        return coords

    async def resolve(self, addresses: Sequence[str]) -> List[Optional[Coordinates]]:
        positions = [i for i, a in enumerate(addresses) if a and a.strip()]
        results: List[Optional[Coordinates]] = [None] * len(addresses)
        if not positions:
            return results

        queries = [addresses[i] for i in positions]
        try:
            generation_config = genai.GenerationConfig(
                response_mime_type="application/json",
                temperature=0.0
            )
            response = await self.model.generate_content_async(
                self._build_prompt(queries), generation_config=generation_config
            )
            items = self._robust_parse_json(response.text)
        except Exception as e:
            logger.error(f"Geocoding batch failed: {e}")
            return results

        for pos, coords in zip(positions, self._to_coordinates(items, len(queries))):
            results[pos] = coords
        return results
