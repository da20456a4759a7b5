import logging
import sys
from typing import Any, Dict, List, Optional

from user_service.adapters.repository import UserStore
from user_service.domain.user import User
from user_service.services.config import settings

logging.basicConfig(stream=sys.stdout, level=settings.USER_SERVICE_LOG_LEVEL)
logger = logging.getLogger(__name__)


def get_user_list(store: UserStore) -> List[Dict[str, Any]]:
    logger.info("start get_user_list")
    users = [user.to_dict() for user in store.get_all_users()]
    logger.info(f"finish get_user_list, found={len(users)}")
    return users


def get_user(user_id: int, store: UserStore) -> Optional[Dict[str, Any]]:
    logger.info("start get_user")
    logger.info(f"{user_id=}")
    user = store.get_user_by_id(user_id)
    logger.info("finish get_user")
    return None if user is None else user.to_dict()


def create_new_user(name: str, email: str, store: UserStore) -> Dict[str, Any]:
    logger.info("start create_new_user")
    # id 0 is a placeholder, the store assigns the real one
    user = store.add_user(User(id=0, name=name, email=email))
    logger.info(f"{user.id=}")
    logger.info("finish create_new_user")
    return user.to_dict()


def update_exist_user(user_id: int, name: str, email: str, store: UserStore) -> Optional[Dict[str, Any]]:
    logger.info("start update_exist_user")
    logger.info(f"{user_id=}")
    user = store.update_user(user_id, User(id=user_id, name=name, email=email))
    if user is None:
        logger.info("user not found")
    logger.info("finish update_exist_user")
    return None if user is None else user.to_dict()


def delete_exist_user(user_id: int, store: UserStore) -> bool:
    logger.info("start delete_exist_user")
    logger.info(f"{user_id=}")
    deleted = store.delete_user(user_id)
    if deleted:
        logger.info("user deleted")
    logger.info("finish delete_exist_user")
    return deleted
