"""
tests/test_tools.py

Tests for the third-party data provider helpers.
"""
import json
from types import SimpleNamespace

import httpx
import pytest

from pharos_agent_kit import AgentConfig
from pharos_agent_kit.tools import coingecko, defillama, dexscreener, elfa, http, image, perplexity


def stub_get_json(module, monkeypatch, responses):
    """Replace a module's get_json with a URL lookup, recording calls"""
    calls = []

    async def fake_get_json(url, params=None, headers=None):
        calls.append({"url": url, "params": params, "headers": headers})
        response = responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(module, "get_json", fake_get_json)
    return calls


class TestGetJson:
    """The shared HTTP helper"""

    @pytest.fixture
    def mock_http(self, monkeypatch):
        real_client = httpx.AsyncClient

        def install(handler):
            transport = httpx.MockTransport(handler)
            monkeypatch.setattr(
                http.httpx, "AsyncClient", lambda **kwargs: real_client(transport=transport, **kwargs)
            )

        return install

    async def test_decodes_json(self, mock_http):
        """Test that the body is decoded and params are sent"""

        def handler(request):
            assert request.url.params["q"] == "usdc"
            assert request.headers["x-test"] == "1"
            return httpx.Response(200, json={"ok": True})

        mock_http(handler)

        result = await http.get_json("https://example.test/search", params={"q": "usdc"}, headers={"x-test": "1"})

        assert result == {"ok": True}

    async def test_raises_on_error_status(self, mock_http):
        """Test that non-2xx responses raise"""
        mock_http(lambda request: httpx.Response(503, json={"error": "down"}))

        with pytest.raises(httpx.HTTPStatusError):
            await http.get_json("https://example.test/down")

    async def test_post_sends_json_body(self, mock_http):
        """Test that post_json sends the body and decodes the reply"""

        def handler(request):
            assert request.method == "POST"
            assert request.headers["authorization"] == "Bearer k"
            assert json.loads(request.content) == {"q": "pharos"}
            return httpx.Response(200, json={"ok": True})

        mock_http(handler)

        result = await http.post_json("https://example.test/ask", json={"q": "pharos"}, headers={"Authorization": "Bearer k"})

        assert result == {"ok": True}


class TestDefiLlama:
    """DeFiLlama lookups"""

    def test_slug_exact_match_wins(self):
        """Test that an exact slug is used alone"""
        assert defillama.get_slug_matches("Aave", ["aave", "aave-v2", "aave-v3"]) == ["aave"]

    def test_slug_fuzzy_match(self):
        """Test that near misses are matched"""
        matches = defillama.get_slug_matches("uniswp", ["uniswap", "sushiswap", "curve"])

        assert matches[0] == "uniswap"
        assert "curve" not in matches

    def test_slug_no_match(self):
        """Test that unrelated names match nothing"""
        assert defillama.get_slug_matches("zzzz", ["uniswap", "curve"]) == []

    async def test_tvl_falls_back_to_next_slug(self, monkeypatch):
        """Test that a failing slug is skipped"""
        request = httpx.Request("GET", "https://api.llama.fi/tvl/aave-v3")
        stub_get_json(
            defillama,
            monkeypatch,
            {
                "https://api.llama.fi/protocols": [{"slug": "aave-v2"}, {"slug": "aave-v3"}, {"name": "no slug"}],
                "https://api.llama.fi/tvl/aave-v3": httpx.HTTPStatusError(
                    "not found", request=request, response=httpx.Response(404, request=request)
                ),
                "https://api.llama.fi/tvl/aave-v2": 42.0,
            },
        )

        result = await defillama.get_protocol_tvl("aave-v")

        assert result == {"protocol_name": "aave-v2", "tvl": 42.0}

    async def test_tvl_no_match(self, monkeypatch):
        """Test that unknown protocols raise"""
        stub_get_json(defillama, monkeypatch, {"https://api.llama.fi/protocols": [{"slug": "curve"}]})

        with pytest.raises(ValueError, match="No matching protocol slugs"):
            await defillama.get_protocol_tvl("qqqqqq")

    async def test_fetch_prices_search_width(self, monkeypatch):
        """Test that the search width is passed as a query parameter"""
        url = "https://coins.llama.fi/prices/current/ethereum:0x1,base:0x2"
        calls = stub_get_json(defillama, monkeypatch, {url: {"coins": {"ethereum:0x1": {"price": 1}}}})

        result = await defillama.fetch_prices(["ethereum:0x1", "base:0x2"], search_width="6h")

        assert result == {"ethereum:0x1": {"price": 1}}
        assert calls[0]["params"] == {"searchWidth": "6h"}

    async def test_fetch_prices_empty(self):
        """Test that at least one token is required"""
        with pytest.raises(ValueError):
            await defillama.fetch_prices([])

    async def test_price_by_chain_id(self, monkeypatch):
        """Test that chain ids map to DeFiLlama slugs"""
        url = "https://coins.llama.fi/prices/current/base:0xabc"
        stub_get_json(defillama, monkeypatch, {url: {"coins": {"base:0xabc": {"price": 2}}}})

        assert await defillama.fetch_token_price_by_chain_id("0xabc", 8453) == {"base:0xabc": {"price": 2}}

    async def test_price_by_unknown_chain_id(self):
        """Test that unmapped chains are refused"""
        with pytest.raises(ValueError, match="not supported"):
            await defillama.fetch_token_price_by_chain_id("0xabc", 50002)


class TestDexScreener:
    """DexScreener lookups"""

    PAIRS = {
        "pairs": [
            {"chainId": "ethereum", "fdv": 100, "baseToken": {"symbol": "PEPE", "address": "0xeth"}},
            {"chainId": "base", "fdv": 500, "baseToken": {"symbol": "PEPE", "address": "0xbase"}},
            {"chainId": "base", "fdv": 9000, "baseToken": {"symbol": "PEPE2", "address": "0xother"}},
            {"chainId": "bsc", "fdv": None, "baseToken": {"symbol": "pepe", "address": "0xbsc"}},
        ]
    }

    async def test_best_pair_by_fdv(self, monkeypatch):
        """Test that the highest FDV pair with a matching symbol wins"""
        stub_get_json(dexscreener, monkeypatch, {"https://api.dexscreener.com/latest/dex/search": self.PAIRS})

        assert await dexscreener.get_token_address_from_ticker("PEPE") == "0xbase"

    async def test_chain_filter(self, monkeypatch):
        """Test restricting the search to one chain"""
        stub_get_json(dexscreener, monkeypatch, {"https://api.dexscreener.com/latest/dex/search": self.PAIRS})

        assert await dexscreener.get_token_address_from_ticker("pepe", chain_id="ethereum") == "0xeth"

    async def test_unknown_ticker(self, monkeypatch):
        """Test that unmatched tickers raise"""
        stub_get_json(dexscreener, monkeypatch, {"https://api.dexscreener.com/latest/dex/search": {"pairs": None}})

        with pytest.raises(ValueError, match="NOPE"):
            await dexscreener.get_token_data_by_ticker("NOPE")


class TestCoinGecko:
    """CoinGecko host and key selection"""

    async def test_pro_key_preferred(self, monkeypatch):
        """Test that a pro key selects the pro host"""
        config = AgentConfig(coingecko_pro_api_key="pro", coingecko_demo_api_key="demo")
        calls = stub_get_json(
            coingecko,
            monkeypatch,
            {"https://pro-api.coingecko.com/api/v3/coins/top_gainers_losers": {"top_gainers": []}},
        )

        await coingecko.get_top_gainers(config, duration="1h", top_coins="300")

        assert calls[0]["headers"] == {"x-cg-pro-api-key": "pro"}
        assert calls[0]["params"] == {"vs_currency": "usd", "duration": "1h", "top_coins": "300"}

    async def test_token_price_params(self, monkeypatch):
        """Test that contract addresses are joined"""
        url = "https://api.coingecko.com/api/v3/simple/token_price/ethereum"
        calls = stub_get_json(coingecko, monkeypatch, {url: {}})

        await coingecko.get_token_price_data(AgentConfig(coingecko_demo_api_key="demo"), ["0x1", "0x2"])

        assert calls[0]["params"]["contract_addresses"] == "0x1,0x2"
        assert calls[0]["params"]["vs_currencies"] == "usd"

    async def test_no_key(self):
        """Test that a key is required"""
        with pytest.raises(ValueError, match="No CoinGecko API key provided"):
            await coingecko.get_trending_tokens(AgentConfig())


class TestElfa:
    """Elfa AI lookups"""

    async def test_no_key(self):
        """Test that a key is required"""
        with pytest.raises(ValueError, match="No Elfa AI API key provided"):
            await elfa.ping_elfa_ai_api(AgentConfig())

    async def test_smart_mentions_paging(self, monkeypatch):
        """Test that paging parameters are forwarded"""
        calls = stub_get_json(elfa, monkeypatch, {"https://api.elfa.ai/v1/mentions": {"data": []}})

        await elfa.get_smart_mentions(AgentConfig(elfa_ai_api_key="k"), limit=5, offset=10)

        assert calls[0]["params"] == {"limit": 5, "offset": 10}
        assert calls[0]["headers"] == {"x-elfa-api-key": "k"}


class TestPerplexity:
    """Perplexity AI lookups"""

    async def test_no_key(self):
        """Test that a key is required"""
        with pytest.raises(ValueError, match="No Perplexity API key provided"):
            await perplexity.get_info(AgentConfig(), "what is pharos?")

    async def test_returns_first_choice(self, monkeypatch):
        """Test that the question is sent and the first answer returned"""
        seen = {}

        async def fake_post_json(url, json, headers=None):
            seen.update(url=url, json=json, headers=headers)
            return {"choices": [{"message": {"content": "An EVM layer 1"}}]}

        monkeypatch.setattr(perplexity, "post_json", fake_post_json)

        answer = await perplexity.get_info(AgentConfig(perplexity_api_key="pplx"), "what is pharos?")

        assert answer == "An EVM layer 1"
        assert seen["url"] == "https://api.perplexity.ai/chat/completions"
        assert seen["headers"] == {"Authorization": "Bearer pplx"}
        assert seen["json"]["messages"][-1] == {"role": "user", "content": "what is pharos?"}


class FakeImages:
    def __init__(self, urls):
        self.urls = urls
        self.calls = []

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(data=[SimpleNamespace(url=url) for url in self.urls])


class FakeOpenAI:
    """Stand-in for AsyncOpenAI that records the key and image requests"""

    instances = []

    def __init__(self, api_key=None):
        self.api_key = api_key
        self.images = FakeImages(["https://img.test/1.png"])
        FakeOpenAI.instances.append(self)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class TestImage:
    """OpenAI image generation"""

    @pytest.fixture(autouse=True)
    def fake_openai(self, monkeypatch):
        FakeOpenAI.instances = []
        monkeypatch.setattr(image, "AsyncOpenAI", FakeOpenAI)

    async def test_no_key(self):
        """Test that a key is required"""
        with pytest.raises(ValueError, match="No OpenAI API key provided"):
            await image.create_image(AgentConfig(), "a cat")

        assert FakeOpenAI.instances == []

    async def test_returns_urls(self):
        """Test that the prompt and size are forwarded and URLs returned"""
        urls = await image.create_image(AgentConfig(openai_api_key="sk"), "a cat", size="1792x1024")

        client = FakeOpenAI.instances[0]
        assert urls == ["https://img.test/1.png"]
        assert client.api_key == "sk"
        assert client.images.calls == [{"model": "dall-e-3", "prompt": "a cat", "n": 1, "size": "1792x1024"}]
