"""
会话管理器 - SDK 的顶层入口。

在无状态的 AuthAPI / StorageAPI 之上增加会话持久化:
登录成功后写入会话记录, 登出成功后清除, 注册后自动登录以获取 token。
"""

from typing import Any, Optional

from core.config import Settings, get_settings
from core.logging import get_logger
from core.models import (
    Credential,
    HostConfiguration,
    JSONValue,
    SessionRecord,
    UploadInfo,
)
from core.session_store import BaseSessionStore, SessionStoreError, create_session_store
from tools.host_api.auth import AuthAPI
from tools.host_api.base import Transport
from tools.host_api.dispatcher import RequestDispatcher
from tools.host_api.httpx_client import HttpxTransport
from tools.host_api.storage import StorageAPI


logger = get_logger(__name__)


class SessionManager:
    """
    会话生命周期管理器。

    - 登录并保存会话记录
    - 登出并清除会话记录
    - 注册后自动登录
    - 透传存储操作

    所有错误原样向上抛出; 只有在请求成功之后才会修改会话存储。
    并发调用之间不加锁, 最后完成的登录覆盖会话记录。
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        session_store: BaseSessionStore,
        session_key: str = "oxvsUser",
    ):
        """
        初始化会话管理器。

        Args:
            dispatcher: 请求分发器 (持有 transport 与 host 配置)
            session_store: 会话记录的键值存储
            session_key: 会话记录在存储中的键
        """
        self._dispatcher = dispatcher
        self._store = session_store
        self._session_key = session_key
        self.auth = AuthAPI(dispatcher)
        self.storage = StorageAPI(dispatcher)

    @property
    def host_config(self) -> HostConfiguration:
        return self._dispatcher.host_config

    @property
    def host_url(self) -> str:
        return self._dispatcher.host_config.host_url

    @host_url.setter
    def host_url(self, value: str) -> None:
        self._dispatcher.host_config.host_url = value

    @property
    def session_key(self) -> str:
        return self._session_key

    # =========================================
    # Auth
    # =========================================

    async def login(self, user_id: str, password: str) -> JSONValue:
        """登录并保存会话记录, 返回服务器原始响应。"""
        response = await self.auth.login(user_id, password)

        token = response.get("token") if isinstance(response, dict) else None
        record = SessionRecord(id=user_id, token=token)
        await self._store.set(self._session_key, record.to_json())

        logger.info(
            "Session stored",
            user_id=user_id,
            has_token=token is not None,
        )
        return response

    async def logout(self, credential: Credential) -> bool:
        """登出; 服务器确认后清除会话记录。"""
        await self.auth.logout(credential)
        await self._store.remove(self._session_key)

        logger.info("Session cleared", user_id=credential.id)
        return True

    async def register(self, user_id: str, password: str) -> JSONValue:
        """
        注册新用户, 然后登录。

        注册接口不返回 token, 因此紧接着调用一次 login。
        任一步失败都直接抛出, 不重试也不回滚:
        注册成功而登录失败时, 用户已在服务器端存在, 本地仍未登录。
        """
        await self.auth.register(user_id, password)
        logger.info("User registered", user_id=user_id)
        return await self.login(user_id, password)

    # =========================================
    # Storage
    # =========================================

    async def get(self, credential: Credential, resource_id: str) -> JSONValue:
        """获取存储对象。"""
        return await self.storage.get(credential, resource_id)

    async def upload(self, credential: Credential, info: UploadInfo) -> JSONValue:
        """上传存储对象。"""
        return await self.storage.upload(credential, info)

    async def remove(
        self,
        credential: Credential,
        resource_id: str,
        requesting_id: str,
    ) -> JSONValue:
        """删除存储对象。"""
        return await self.storage.remove(credential, resource_id, requesting_id)

    # =========================================
    # Session state
    # =========================================

    async def current_session(self) -> Optional[SessionRecord]:
        """读取当前保存的会话记录, 不存在时返回 None。"""
        raw = await self._store.get(self._session_key)
        if raw is None:
            return None
        try:
            return SessionRecord.from_json(raw)
        except (TypeError, ValueError) as e:
            raise SessionStoreError(
                f"Stored session under {self._session_key!r} is unreadable: {e}"
            ) from e

    async def current_credential(self) -> Optional[Credential]:
        """当前会话的 Credential; 未登录或 token 缺失时返回 None。"""
        record = await self.current_session()
        if record is None:
            return None
        return record.to_credential()

    async def aclose(self) -> None:
        """关闭 transport 与会话存储。"""
        try:
            await self._dispatcher.transport.aclose()
        finally:
            await self._store.close()

    async def __aenter__(self) -> "SessionManager":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_session_manager(
    settings: Optional[Settings] = None,
    transport: Optional[Transport] = None,
    session_store: Optional[BaseSessionStore] = None,
    host_config: Optional[HostConfiguration] = None,
) -> SessionManager:
    """
    根据配置创建 SessionManager。

    Args:
        settings: SDK 配置 (默认使用全局配置)
        transport: 可选的 transport (默认创建 HttpxTransport)
        session_store: 可选的会话存储 (默认按配置创建)
        host_config: 可选的共享 host 配置 (默认按配置创建)
    """
    settings = settings or get_settings()

    if transport is None:
        transport = HttpxTransport(timeout=settings.request_timeout_seconds)
    if session_store is None:
        session_store = create_session_store(settings)
    if host_config is None:
        host_config = HostConfiguration(
            host_url=settings.host_url,
            api_prefix=settings.api_prefix,
        )

    logger.info(
        "Creating session manager",
        host_url=host_config.host_url,
        session_backend=settings.session_backend,
    )
    return SessionManager(
        dispatcher=RequestDispatcher(transport, host_config),
        session_store=session_store,
        session_key=settings.session_key,
    )
