from twitter_cursor_client.util.items import TwitterList, TwitterUser


class ListID(object):
    """ a list is addressed either by its numeric id or by owner + slug """

    def __init__(self, list_id=None, slug=None, owner=None):
        if list_id is None and not (slug and owner is not None):
            raise ValueError('ListID needs a list_id, or both a slug and an owner')
        self.list_id = list_id
        self.slug = slug
        self.owner = owner

    @staticmethod
    def from_id(list_id):
        return ListID(list_id=list_id)

    @staticmethod
    def from_slug(owner, slug):
        return ListID(slug=slug, owner=owner)

    @staticmethod
    def coerce(value):
        if isinstance(value, ListID):
            return value
        if isinstance(value, TwitterList):
            return ListID(list_id=value.id)
        return ListID(list_id=value)

    def __repr__(self):
        if self.list_id is not None:
            return f"ListID({self.list_id})"
        return f"ListID({self.owner!r}/{self.slug!r})"


def add_param(params, key, value):
    params[key] = str(value)


def _user_param(user, id_key, name_key):
    if isinstance(user, TwitterUser):
        return id_key, user.id
    if isinstance(user, int):
        return id_key, user
    if isinstance(user, str) and user:
        return name_key, user.lstrip('@')
    raise ValueError(f"invalid user id or screen_name: {user!r}")


def add_name_param(params, user):
    """ ints (and TwitterUser objects) are sent as user_id, strings as screen_name """
    key, value = _user_param(user, 'user_id', 'screen_name')
    add_param(params, key, value)


def add_list_param(params, list_id):
    list_id = ListID.coerce(list_id)
    if list_id.list_id is not None:
        add_param(params, 'list_id', list_id.list_id)
        return

    add_param(params, 'slug', list_id.slug)
    key, value = _user_param(list_id.owner, 'owner_id', 'owner_screen_name')
    add_param(params, key, value)
