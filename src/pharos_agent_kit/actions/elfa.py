"""Elfa AI social mention actions."""

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition, EmptyInput


class SmartMentionsInput(BaseModel):
    """Input schema for smart mentions."""

    limit: int = Field(default=100, ge=1, le=100, description="Number of mentions to return")
    offset: int = Field(default=0, ge=0, description="Offset for pagination")


class TopMentionsInput(BaseModel):
    """Input schema for top mentions by ticker."""

    ticker: str = Field(min_length=1, description="Token ticker to search for (e.g. 'ETH')")
    time_window: str = Field(default="1h", description="Time window such as '1h', '24h' or '7d'")
    page: int = Field(default=1, ge=1, description="Page number")
    page_size: int = Field(default=10, ge=1, description="Results per page")
    include_account_details: bool = Field(
        default=False,
        description="Include details of the accounts that posted",
    )


class SearchMentionsInput(BaseModel):
    """Input schema for keyword mention search."""

    keywords: str = Field(
        min_length=1,
        description="Comma separated keywords to search for (e.g. 'pharos, l1')",
    )
    from_timestamp: int = Field(description="Start of the window as a unix timestamp")
    to_timestamp: int = Field(description="End of the window as a unix timestamp")
    limit: int = Field(default=20, ge=1, description="Number of mentions to return")


class AccountStatsInput(BaseModel):
    """Input schema for Twitter account stats."""

    username: str = Field(min_length=1, description="Twitter username without the @")


async def _ping(agent, input: EmptyInput) -> dict:
    return success_result(response=await tools.ping_elfa_ai_api(agent.config))


async def _api_key_status(agent, input: EmptyInput) -> dict:
    return success_result(response=await tools.get_elfa_ai_api_key_status(agent.config))


async def _smart_mentions(agent, input: SmartMentionsInput) -> dict:
    result = await tools.get_smart_mentions(agent.config, input.limit, input.offset)
    return success_result(mentions=result)


async def _top_mentions(agent, input: TopMentionsInput) -> dict:
    result = await tools.get_top_mentions_by_ticker(
        agent.config,
        input.ticker,
        input.time_window,
        input.page,
        input.page_size,
        input.include_account_details,
    )
    return success_result(mentions=result)


async def _search_mentions(agent, input: SearchMentionsInput) -> dict:
    result = await tools.search_mentions_by_keywords(
        agent.config, input.keywords, input.from_timestamp, input.to_timestamp, input.limit
    )
    return success_result(mentions=result)


async def _trending_tokens(agent, input: EmptyInput) -> dict:
    return success_result(tokens=await tools.get_trending_tokens_using_elfa_ai(agent.config))


async def _account_stats(agent, input: AccountStatsInput) -> dict:
    result = await tools.get_smart_twitter_account_stats(agent.config, input.username)
    return success_result(stats=result)


elfa_ping_action = ActionDefinition(
    name="ELFA_PING_ACTION",
    similes=("ping elfa", "is elfa up", "check elfa api"),
    description="Check that the Elfa AI API is reachable",
    examples=(
        (
            ActionExample(
                input={},
                output={"status": "success", "response": {"success": True, "data": {"message": "pong"}}},
                explanation="The Elfa AI API responded to the ping",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_ping,
)

elfa_api_key_status_action = ActionDefinition(
    name="ELFA_API_KEY_STATUS_ACTION",
    similes=("elfa api key status", "elfa usage", "elfa key limits"),
    description="Get the usage and limits of the configured Elfa AI API key",
    examples=(
        (
            ActionExample(
                input={},
                output={
                    "status": "success",
                    "response": {"success": True, "data": {"status": "active", "remainingRequests": 950}},
                },
                explanation="The API key is active with 950 requests remaining",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_api_key_status,
)

elfa_get_smart_mentions_action = ActionDefinition(
    name="ELFA_GET_SMART_MENTIONS_ACTION",
    similes=("smart mentions", "what are smart accounts saying", "latest crypto tweets"),
    description="Get recent tweets from smart crypto accounts via Elfa AI",
    examples=(
        (
            ActionExample(
                input={"limit": 10, "offset": 0},
                output={"status": "success", "mentions": {"data": [{"content": "Pharos mainnet soon"}]}},
                explanation="Get the ten latest smart mentions",
            ),
        ),
    ),
    schema=SmartMentionsInput,
    handler=_smart_mentions,
)

elfa_get_top_mentions_by_ticker_action = ActionDefinition(
    name="ELFA_GET_TOP_MENTIONS_BY_TICKER_ACTION",
    similes=("top mentions of a token", "most engaging tweets about", "ticker mentions"),
    description="Get the most engaging tweets mentioning a token ticker via Elfa AI",
    examples=(
        (
            ActionExample(
                input={"ticker": "ETH", "time_window": "24h"},
                output={"status": "success", "mentions": {"data": {"data": [{"likeCount": 1200}]}}},
                explanation="Get the top ETH mentions over the last day",
            ),
        ),
    ),
    schema=TopMentionsInput,
    handler=_top_mentions,
)

elfa_search_mentions_by_keywords_action = ActionDefinition(
    name="ELFA_SEARCH_MENTIONS_BY_KEYWORDS_ACTION",
    similes=("search tweets", "search mentions", "find tweets about"),
    description="Search tweets mentioning keywords within a time window via Elfa AI",
    examples=(
        (
            ActionExample(
                input={
                    "keywords": "pharos, parallel evm",
                    "from_timestamp": 1735689600,
                    "to_timestamp": 1735776000,
                },
                output={"status": "success", "mentions": {"data": [{"content": "Pharos is fast"}]}},
                explanation="Find tweets about Pharos on the first day of 2025",
            ),
        ),
    ),
    schema=SearchMentionsInput,
    handler=_search_mentions,
)

elfa_trending_tokens_action = ActionDefinition(
    name="ELFA_TRENDING_TOKENS_ACTION",
    similes=("trending tokens on twitter", "most mentioned tokens", "social trending tokens"),
    description="Get the tokens with the fastest growing mention counts via Elfa AI",
    examples=(
        (
            ActionExample(
                input={},
                output={"status": "success", "tokens": {"data": {"data": [{"token": "pharos", "change_percent": 310}]}}},
                explanation="Get the tokens trending on social media over the last day",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_trending_tokens,
)

elfa_smart_twitter_account_stats_action = ActionDefinition(
    name="ELFA_SMART_TWITTER_ACCOUNT_STATS_ACTION",
    similes=("twitter account stats", "smart followers of", "account smart stats"),
    description="Get smart follower statistics for a Twitter account via Elfa AI",
    examples=(
        (
            ActionExample(
                input={"username": "pharos_network"},
                output={"status": "success", "stats": {"data": {"smartFollowingCount": 1520}}},
                explanation="Get smart stats for the pharos_network account",
            ),
        ),
    ),
    schema=AccountStatsInput,
    handler=_account_stats,
)
