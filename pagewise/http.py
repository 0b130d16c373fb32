import logging

import httpx
from tqdm import tqdm

logger = logging.getLogger(__name__)


class HTTPError(Exception):
    def __init__(self, url, status_code):
        self.url = url
        self.status_code = status_code

        super().__init__(f"Got status code {status_code} for {url}")


def fetch_text(url, *, encoding=None, progress=True, **httpx_args) -> str:
    """
    Download a text resource, showing a progress bar on stderr.

    :param url: URL to fetch
    :param encoding: overrides the charset announced by the server
    :param progress: show the progress bar
    :param httpx_args: extra arguments for :class:`httpx.Client`
    """
    logger.info("Fetching %s", url)

    with (httpx.Client(http2=True, follow_redirects=True, **httpx_args) as client,
          client.stream('GET', url) as r):
        if not r.is_success:
            raise HTTPError(url, r.status_code)

        total = int(size) if (size := r.headers.get('Content-Length')) else None
        chunks = []

        with tqdm(desc=url.rsplit('/', 1)[-1] or url, total=total,
                  unit='B', unit_scale=True, disable=not progress) as pbar:
            for chunk in r.iter_bytes():
                chunks.append(chunk)
                # Content-Length counts bytes on the wire, before decompression
                pbar.update(r.num_bytes_downloaded - pbar.n)

        content = b''.join(chunks)
        return content.decode(encoding or r.encoding or 'utf-8', errors='replace')
