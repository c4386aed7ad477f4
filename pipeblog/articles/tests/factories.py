from factory import Faker, SelfAttribute, Sequence, SubFactory, post_generation
from factory.django import DjangoModelFactory  # type: ignore

from ...blogs.tests.factories import BlogFactory
from ..choices import ArticleStatuses
from ..models import Article, Category, Tag


class TagFactory(DjangoModelFactory):
    class Meta:
        model = Tag

    blog = SubFactory(BlogFactory)
    title = Sequence(lambda n: f"tag{n}")


class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = Category
        skip_postgeneration_save = True

    blog = SubFactory(BlogFactory)
    description = Faker("sentence")
    title = Sequence(lambda n: f"Category {n}")

    @post_generation
    def tags(self, create, extracted, **kwargs):
        if create and extracted:
            self.tags.add(*extracted)


class ArticleFactory(DjangoModelFactory):
    class Meta:
        model = Article
        skip_postgeneration_save = True

    abstract = Faker("sentence")
    author = SelfAttribute("blog.owner")
    blog = SubFactory(BlogFactory)
    content = Faker("text")
    status = ArticleStatuses.PUBLISHED
    title = Sequence(lambda n: f"Article {n}")

    @post_generation
    def tags(self, create, extracted, **kwargs):
        if create and extracted:
            self.tags.add(*extracted)
