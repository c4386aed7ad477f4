"""Object-level permissions for Comments. The permission object is the
Article being commented on."""

import rules


@rules.predicate
def article_accepts_comments(_, article):
    """Checks that the article and its blog are open for comments. A missing
    article is left to form validation, so None passes.

    Expects an Article or None as article."""
    return article is None or (article.commentable and article.blog.commentable)


add_comment = rules.is_authenticated & article_accepts_comments
