"""Continuation pagination through the internal browse API."""

import logging
from typing import Any

from ytplaylist.client import PlaylistHttpClient
from ytplaylist.config import ScraperConfig
from ytplaylist.models.cancel import CancelToken
from ytplaylist.models.domain import PlaylistItem
from ytplaylist.models.request import NormalizedOptions, RequestContext
from ytplaylist.services.items import parse_item
from ytplaylist.utils.traverse import find_renderer, get_path

logger = logging.getLogger(__name__)

CONTINUATION_TAG = "continuationItemRenderer"


def continuation_token(raw_items: list[Any]) -> str | None:
    """Return the next-page token of a raw item list, if it has one."""
    renderer = find_renderer(raw_items, CONTINUATION_TAG)
    token = get_path(renderer, "continuationEndpoint", "continuationCommand", "token")
    return token if isinstance(token, str) and token else None


def take_items(
    raw_items: list[Any], opts: NormalizedOptions, base_video_url: str
) -> list[PlaylistItem]:
    """Parse a page of raw entries, keeping at most the remaining budget.

    The accepted count is consumed from ``opts.limit``.
    """
    parsed = [
        item for raw in raw_items if (item := parse_item(raw, base_video_url)) is not None
    ]
    accepted = parsed[: opts.limit]
    opts.consume(len(accepted))
    return accepted


class ContinuationPaginator:
    """Follows continuation tokens until the budget or the playlist runs out.

    Pages are fetched strictly one after another, since each token comes
    from the previous page. The loop carries the token and the shared
    ``opts.limit`` budget; no token is followed once the budget is zero.
    """

    def __init__(self, client: PlaylistHttpClient, config: ScraperConfig | None = None) -> None:
        self._client = client
        self._config = config or ScraperConfig()

    def paginate(
        self,
        api_key: str,
        token: str | None,
        context: RequestContext,
        opts: NormalizedOptions,
        cancel_token: CancelToken | None = None,
    ) -> list[PlaylistItem]:
        """Fetch every continuation page reachable from ``token``.

        An unexpected response shape ends pagination quietly: it means
        there is no more data, not that something failed.

        Args:
            api_key: Internal API key scraped from the playlist page.
            token: First continuation token.
            context: Client context sent with every request.
            opts: Normalized options; ``opts.limit`` is decremented in place.
            cancel_token: Optional token checked before each request.

        Returns:
            Items of all fetched pages, in upstream order.

        Raises:
            TransportError: If a page request fails.
            CancellationError: If cancel_token is cancelled.
        """
        url = self._config.browse_api_url + api_key
        payload_context = context.to_payload()
        items: list[PlaylistItem] = []
        pages = 0

        while token and opts.limit >= 1:
            response = self._client.post_json(
                url,
                {"context": payload_context, "continuation": token},
                opts.request_options,
                cancel_token,
            )
            raw_items = get_path(
                response,
                "onResponseReceivedActions",
                0,
                "appendContinuationItemsAction",
                "continuationItems",
            )
            if not isinstance(raw_items, list):
                logger.debug("Continuation response without items, stopping")
                break

            pages += 1
            items.extend(take_items(raw_items, opts, self._config.video_url))
            token = continuation_token(raw_items)

        logger.debug(
            "Fetched %d continuation pages (%d items, %d left in budget)",
            pages,
            len(items),
            opts.limit,
        )
        return items
