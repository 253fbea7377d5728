from homestay.models.post import Post
from homestay.schemas.post import PostRead
from homestay.storage.base import Repository


class PostRepository(Repository):
    model = Post
    read_schema = PostRead
    entity = "Post"
    unique_fields = ("slug",)

    def _order_by(self):
        return [Post.published_at.desc(), Post.id.desc()]

    def get_by_slug(self, slug: str):
        with self._guard(f"get Post {slug!r}"):
            row = self.db.query(Post).filter(Post.slug == slug).first()
        return self._to_read(row) if row else None
