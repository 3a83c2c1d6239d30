from storefront.dao.base_dao import BaseDAO
from storefront.models.user import User


class UserDAO(BaseDAO[User]):
    def __init__(self):
        super().__init__(User)


user_dao = UserDAO()
