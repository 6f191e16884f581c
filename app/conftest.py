"""Pytest 配置文件"""

from collections.abc import Callable

import httpx
import pytest

from libs.packaged import client as client_module
from libs.packaged.client import Dispatcher

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(scope="function")
def make_dispatcher():
    """创建使用 MockTransport 的 Dispatcher，测试结束后关闭"""
    dispatchers: list[Dispatcher] = []

    def factory(handler: Handler, **kwargs) -> Dispatcher:
        dispatcher = Dispatcher(transport_factory=lambda: httpx.MockTransport(handler), **kwargs)
        dispatchers.append(dispatcher)
        return dispatcher

    yield factory

    for dispatcher in dispatchers:
        dispatcher.close()


@pytest.fixture(scope="function")
def default_dispatcher(monkeypatch, make_dispatcher):
    """替换模块级 fetch 使用的默认 Dispatcher"""

    def install(handler: Handler) -> Dispatcher:
        dispatcher = make_dispatcher(handler)
        monkeypatch.setattr(client_module, "_default_dispatcher", dispatcher)
        return dispatcher

    return install
