"""
Base Service Client for outbound HTTP calls

所有 HTTP 客户端的基类，统一管理 httpx.AsyncClient 的生命周期
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    HTTP 客户端基类

    自动处理：
    1. HTTP 客户端管理
    2. 默认 headers
    3. 超时控制

    使用示例：
        class SheetClient(BaseServiceClient):
            service_name = "sheet"

            async def rows(self):
                response = await self.get("")
                return response.json()
    """

    # 子类需要定义
    service_name: str = None

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        follow_redirects: bool = True
    ):
        """
        初始化服务客户端

        Args:
            base_url: 服务基础URL
            timeout: 请求超时时间（秒），None 表示不限制
            client: 预先构建的 httpx.AsyncClient（测试时注入）
            follow_redirects: 是否跟随重定向
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")
        if not base_url or not base_url.strip():
            raise ValueError(f"{self.__class__.__name__} requires a base_url")

        self.base_url = base_url.strip().rstrip('/')

        # 创建 HTTP 客户端
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers=self._build_default_headers(),
            follow_redirects=follow_redirects
        )

        logger.debug(f"Initialized {self.service_name} client: {self.base_url}")

    def _build_default_headers(self) -> Dict[str, str]:
        """构建默认请求headers"""
        return {
            "Content-Type": "application/json",
            "User-Agent": f"inventory-flow/{self.service_name}"
        }

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def close(self):
        """关闭HTTP客户端"""
        if self._owns_client:
            await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器退出"""
        await self.close()

    # ========================================
    # HTTP 方法封装
    # ========================================

    async def get(
        self,
        path: str = "",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """GET 请求"""
        return await self.client.get(self._url(path), params=params, headers=headers)

    async def post(
        self,
        path: str = "",
        json: Optional[Any] = None,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """POST 请求"""
        return await self.client.post(self._url(path), json=json, content=content, headers=headers)


__all__ = ["BaseServiceClient"]
