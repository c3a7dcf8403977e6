# automation_advisor/runtime.py
"""
Runtime wiring.

Builds the plan library, workspace, generation workflow and chat session from
configuration. The LLM client is created on first use so read-only commands
work without a reachable provider or API key.
"""

import logging
from pathlib import Path

from platformdirs import user_data_path

from automation_advisor.chat.session import ChatSession
from automation_advisor.config.loader import APP_NAME
from automation_advisor.config.schema import AdvisorConfig
from automation_advisor.llm.factory import LLMClient, create_llm_client
from automation_advisor.planning.store import PlanStore
from automation_advisor.planning.workflow import GenerationWorkflow
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.storage.json_file import JsonFileStorage

logger = logging.getLogger(__name__)


def get_data_dir(config: AdvisorConfig) -> Path:
    """Directory holding the plan library."""
    if config.storage.data_dir:
        return Path(config.storage.data_dir).expanduser()
    return user_data_path(APP_NAME, ensure_exists=True)


class AdvisorRuntime:
    """
    Owns the long-lived objects of one CLI invocation or server process.

    Manages:
        - Plan library (loaded once from storage)
        - Edit/view workspace over the library
        - Generation workflow and chat session (share one LLM client)
    """

    def __init__(
        self,
        config: AdvisorConfig,
        store: PlanStore | None = None,
        client: LLMClient | None = None,
    ) -> None:
        """
        Args:
            config: Root configuration
            store: Plan library (defaults to JSON files in the data dir)
            client: LLM client (defaults to the configured provider, created lazily)
        """
        self.config = config
        if store is None:
            data_dir = get_data_dir(config)
            store = PlanStore(JsonFileStorage(data_dir))
            logger.info(f"Plan library at {data_dir}")
        self._store = store
        self._workspace = PlanWorkspace(store)
        self._client = client
        self._workflow: GenerationWorkflow | None = None
        self._chat: ChatSession | None = None

    @property
    def store(self) -> PlanStore:
        return self._store

    @property
    def workspace(self) -> PlanWorkspace:
        return self._workspace

    @property
    def client(self) -> LLMClient:
        """The LLM client (created from config on first access)."""
        if self._client is None:
            self._client = create_llm_client(self.config)
            logger.info(f"Created {type(self._client).__name__} (model={self._client.model})")
        return self._client

    @property
    def workflow(self) -> GenerationWorkflow:
        if self._workflow is None:
            self._workflow = GenerationWorkflow(self.client, self._store, self._workspace)
        return self._workflow

    @property
    def chat(self) -> ChatSession:
        if self._chat is None:
            self._chat = ChatSession(self.client)
        return self._chat

    def shutdown(self) -> None:
        """Dispose of the chat session."""
        if self._chat is not None:
            self._chat.close()
            self._chat = None
