"""SSE管理器，用于推送会话状态变化和结果文件."""

import json
import base64
import asyncio
from typing import Dict, Any
from models.models import SSEMessageType


class SSEManager:
    """SSE管理器类."""

    def __init__(self):
        self.clients: Dict[str, asyncio.Queue] = {}  # 存储客户端连接

    async def send_state(self, task_id: str, state: str, message: str) -> None:
        """发送状态更新."""
        message_data = {
            "type": SSEMessageType.STATE,
            "state": state,
            "message": message,
        }
        await self._send_sse_message(task_id, message_data)

    async def send_complete(self, task_id: str, message: str) -> None:
        """发送完成消息."""
        message_data = {"type": SSEMessageType.COMPLETE, "message": message}
        await self._send_sse_message(task_id, message_data)

    async def send_error(self, task_id: str, message: str) -> None:
        """发送错误消息."""
        message_data = {"type": SSEMessageType.ERROR, "message": message}
        await self._send_sse_message(task_id, message_data)

    async def send_file(self, task_id: str, filename: str, file_content: bytes) -> None:
        """发送文件内容."""
        # 将文件内容编码为base64
        encoded_content = base64.b64encode(file_content).decode("utf-8")
        message_data = {
            "type": SSEMessageType.FILE,
            "filename": filename,
            "content": encoded_content,
        }
        await self._send_sse_message(task_id, message_data)

    async def _send_sse_message(
        self, task_id: str, message_data: Dict[str, Any]
    ) -> None:
        """发送SSE消息."""
        if task_id in self.clients:
            queue = self.clients[task_id]
            message = f"data: {json.dumps(message_data, ensure_ascii=False)}\n\n"
            await queue.put(message)

    async def register_client(self, task_id: str) -> asyncio.Queue:
        """注册客户端连接."""
        queue = asyncio.Queue()
        self.clients[task_id] = queue
        return queue

    async def unregister_client(self, task_id: str) -> None:
        """注销客户端连接."""
        if task_id in self.clients:
            del self.clients[task_id]

    @staticmethod
    def is_final(message: str) -> bool:
        """完成或错误消息之后结束流式传输."""
        return (
            f'"type": "{SSEMessageType.COMPLETE}"' in message
            or f'"type": "{SSEMessageType.ERROR}"' in message
        )
