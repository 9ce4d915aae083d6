"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (store, repositories, unit of work, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Scopes:
- APP: InMemoryDatabase, ListenerRegistry, DomainEventDispatcher
  (immutable after startup, safe to share)
- REQUEST: TransactionPort, TodoRepository, UnitOfWork, every handler,
  HandlerRegistry, RequestRouter (never shared between requests)

Flow:
  Container → provides → InMemoryTodoRepository → to → CompleteTodoHandler
                                    ↓
                            uses TodoRepository port
"""

import logging
from typing import AsyncIterable, Iterable, Mapping, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from officeops.application.commands.todos import (
    CompleteTodoHandler,
    CreateTodoHandler,
    DeleteTodoHandler,
    ReopenTodoHandler,
    UpdateTodoHandler,
)
from officeops.application.common.event_dispatcher import (
    DomainEventDispatcher,
    Listener,
    ListenerRegistry,
)
from officeops.application.common.request_router import HandlerRegistry, RequestRouter
from officeops.application.common.unit_of_work import UnitOfWork
from officeops.application.queries.todos import (
    GetAllTodosHandler,
    GetCompletedTodosHandler,
    GetPagedTodosHandler,
    GetPendingTodosHandler,
    GetTodoByIdHandler,
    GetTodoStatsHandler,
)
from officeops.config.settings import Config
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.ports.repositories import TodoRepository
from officeops.domain.ports.transaction import TransactionPort
from officeops.infrastructure.persistence import (
    InMemoryDatabase,
    InMemoryTodoRepository,
    InMemoryTransaction,
)
from officeops.setup.ioc.registrations import (
    TODO_REQUEST_TYPES,
    build_listener_registry,
    default_listener_bindings,
)

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    database and listener_bindings can be passed in to share a store or to
    bind extra listeners (tests do both).
    """

    def __init__(
        self,
        database: Optional[InMemoryDatabase] = None,
        listener_bindings: Optional[Mapping[type[DomainEvent], Iterable[Listener]]] = None,
    ):
        super().__init__()
        self._database = database
        self._listener_bindings = (
            listener_bindings if listener_bindings is not None else default_listener_bindings()
        )

    # ==================== STORE ====================

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        return self._database if self._database is not None else InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    async def get_transaction(self, database: InMemoryDatabase) -> AsyncIterable[TransactionPort]:
        """
        One transaction resource per request.

        A transaction still open when the request scope closes is rolled back.
        """
        transaction = InMemoryTransaction(database)
        yield transaction
        if transaction.is_active:
            logger.warning("Request ended with an open transaction; rolling back")
            await transaction.rollback()

    # ==================== EVENTS ====================

    @provide(scope=Scope.APP)
    def get_listener_registry(self) -> ListenerRegistry:
        return build_listener_registry(self._listener_bindings)

    @provide(scope=Scope.APP)
    def get_event_dispatcher(self, registry: ListenerRegistry) -> DomainEventDispatcher:
        return DomainEventDispatcher(registry)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_todo_repository(self, database: InMemoryDatabase) -> TodoRepository:
        return InMemoryTodoRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(
        self, transaction: TransactionPort, dispatcher: DomainEventDispatcher
    ) -> UnitOfWork:
        return UnitOfWork(transaction, dispatcher)

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_todo_handler(
        self, todo_repository: TodoRepository, uow: UnitOfWork
    ) -> CreateTodoHandler:
        return CreateTodoHandler(todo_repository, uow)

    @provide(scope=Scope.REQUEST)
    def get_update_todo_handler(
        self, todo_repository: TodoRepository, uow: UnitOfWork
    ) -> UpdateTodoHandler:
        return UpdateTodoHandler(todo_repository, uow)

    @provide(scope=Scope.REQUEST)
    def get_complete_todo_handler(
        self, todo_repository: TodoRepository, uow: UnitOfWork
    ) -> CompleteTodoHandler:
        return CompleteTodoHandler(todo_repository, uow)

    @provide(scope=Scope.REQUEST)
    def get_reopen_todo_handler(
        self, todo_repository: TodoRepository, uow: UnitOfWork
    ) -> ReopenTodoHandler:
        return ReopenTodoHandler(todo_repository, uow)

    @provide(scope=Scope.REQUEST)
    def get_delete_todo_handler(
        self, todo_repository: TodoRepository, uow: UnitOfWork
    ) -> DeleteTodoHandler:
        return DeleteTodoHandler(todo_repository, uow)

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_todo_by_id_handler(self, todo_repository: TodoRepository) -> GetTodoByIdHandler:
        return GetTodoByIdHandler(todo_repository)

    @provide(scope=Scope.REQUEST)
    def get_all_todos_handler(self, todo_repository: TodoRepository) -> GetAllTodosHandler:
        return GetAllTodosHandler(todo_repository)

    @provide(scope=Scope.REQUEST)
    def get_completed_todos_handler(
        self, todo_repository: TodoRepository
    ) -> GetCompletedTodosHandler:
        return GetCompletedTodosHandler(todo_repository)

    @provide(scope=Scope.REQUEST)
    def get_pending_todos_handler(
        self, todo_repository: TodoRepository
    ) -> GetPendingTodosHandler:
        return GetPendingTodosHandler(todo_repository)

    @provide(scope=Scope.REQUEST)
    def get_paged_todos_handler(self, todo_repository: TodoRepository) -> GetPagedTodosHandler:
        return GetPagedTodosHandler(todo_repository, max_page_size=Config.MAX_PAGE_SIZE)

    @provide(scope=Scope.REQUEST)
    def get_todo_stats_handler(self, todo_repository: TodoRepository) -> GetTodoStatsHandler:
        return GetTodoStatsHandler(todo_repository)

    # ==================== ROUTING ====================

    @provide(scope=Scope.REQUEST)
    def get_handler_registry(
        self,
        create: CreateTodoHandler,
        update: UpdateTodoHandler,
        complete: CompleteTodoHandler,
        reopen: ReopenTodoHandler,
        delete: DeleteTodoHandler,
        get_by_id: GetTodoByIdHandler,
        get_all: GetAllTodosHandler,
        get_completed: GetCompletedTodosHandler,
        get_pending: GetPendingTodosHandler,
        get_paged: GetPagedTodosHandler,
        get_stats: GetTodoStatsHandler,
    ) -> HandlerRegistry:
        return HandlerRegistry(
            [
                create,
                update,
                complete,
                reopen,
                delete,
                get_by_id,
                get_all,
                get_completed,
                get_pending,
                get_paged,
                get_stats,
            ],
            required=TODO_REQUEST_TYPES,
        )

    @provide(scope=Scope.REQUEST)
    def get_request_router(self, registry: HandlerRegistry) -> RequestRouter:
        return RequestRouter(registry)


def create_container(provider: Optional[AppProvider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(provider or AppProvider())


async def verify_wiring(container: AsyncContainer) -> None:
    """
    Resolve the registries once so missing registrations fail process start.

    Raises ConfigurationError.
    """
    await container.get(ListenerRegistry)
    async with container() as request_container:
        await request_container.get(RequestRouter)
    logger.info("Handler and listener registrations verified")
