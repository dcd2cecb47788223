from dependency_injector import containers, providers

from app.core.config import configs
from app.core.database import Database
from app.repository.main_question_repository import MainQuestionRepository
from app.repository.question_repository import QuestionRepository
from app.services.file_storage_service import FileStorage
from app.services.main_question_service import MainQuestionService
from app.services.question_service import QuestionService


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
            "app.api.v1.endpoints.question",
            "app.api.v1.endpoints.main_question",
            "app.api.v1.endpoints.upload",
        ]
    )

    db = providers.Singleton(Database, db_url=configs.DATABASE_URL, echo=configs.DB_ECHO)
    file_storage = providers.Singleton(
        FileStorage,
        upload_dir=configs.UPLOAD_PATH,
        chunk_size=configs.UPLOAD_CHUNK_SIZE,
    )

    question_repository = providers.Factory(QuestionRepository, session_factory=db.provided.session)
    main_question_repository = providers.Factory(MainQuestionRepository, session_factory=db.provided.session)

    question_service = providers.Factory(
        QuestionService,
        question_repository=question_repository,
        file_storage=file_storage,
    )
    main_question_service = providers.Factory(
        MainQuestionService,
        main_question_repository=main_question_repository,
    )
