"""
Base API client with common functionality
"""

from typing import Optional, Dict, Any
import httpx
from todo_client.config.constants import LOG_BODY_PREVIEW_CHARS
from todo_client.utils.logger import logger


JSON_HEADERS = {"Content-Type": "application/json"}


class BaseAPIClient:
    """Base class for JSON API clients bound to one base URL"""
    
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize base API client
        
        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds, None to wait indefinitely
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=JSON_HEADERS,
            transport=transport,
        )
        self.logger = logger
    
    async def _request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        """
        Make a single HTTP request
        
        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API endpoint
            headers: Request headers
            params: Query parameters
            json_data: JSON body
            expect_body: Decode the response body; when False the body is ignored
            
        Returns:
            Decoded JSON body, or an empty dict when the body is empty or ignored
            
        Raises:
            httpx.HTTPStatusError: If the server answers with a non-2xx status
            httpx.RequestError: If no response was received
            ValueError: If an expected non-empty body is not valid JSON
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        
        self.logger.debug(f"Request: {method} {url}")
        
        request_kwargs = {
            "method": method,
            "url": url,
            "headers": headers,
            "params": params,
        }
        
        if json_data is not None:
            request_kwargs["json"] = json_data
            self.logger.debug(f"Request JSON data: {json_data}")
        
        response = await self.client.request(**request_kwargs)
        
        self.logger.debug(f"Response status: {response.status_code}")
        if response.status_code >= 400:
            self.logger.warning(f"Error response body: {response.text[:LOG_BODY_PREVIEW_CHARS]}")
        
        response.raise_for_status()
        
        # Body not used by the caller, or empty response (204 No Content or empty body)
        if not expect_body or response.status_code == 204 or not response.text.strip():
            return {}
        
        return response.json()
    
    async def get(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make GET request"""
        return await self._request("GET", endpoint, headers=headers, params=params)
    
    async def post(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make POST request"""
        return await self._request("POST", endpoint, headers=headers, params=params, json_data=json_data)
    
    async def patch(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make PATCH request, ignoring the response body"""
        return await self._request(
            "PATCH", endpoint, headers=headers, params=params, json_data=json_data, expect_body=False
        )
    
    async def delete(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make DELETE request, ignoring the response body"""
        return await self._request("DELETE", endpoint, headers=headers, params=params, expect_body=False)
    
    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
    
    async def __aenter__(self):
        """Async context manager entry"""
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
