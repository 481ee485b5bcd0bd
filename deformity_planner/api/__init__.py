from fastapi import APIRouter, FastAPI
import importlib, pkgutil

PACKAGE_NAME = __name__


def include_all_routers(app: FastAPI) -> None:
    """
    api 패키지 하위 모듈의 ROUTERS 리스트를 찾아 app 에 등록.
    _ 로 시작하는 모듈은 건너뛴다.
    """
    package = importlib.import_module(PACKAGE_NAME)

    for modinfo in pkgutil.iter_modules(package.__path__):
        if modinfo.name.startswith("_"):
            continue

        module = importlib.import_module(f"{PACKAGE_NAME}.{modinfo.name}")
        for router in getattr(module, "ROUTERS", ()):
            if isinstance(router, APIRouter):
                app.include_router(router)
