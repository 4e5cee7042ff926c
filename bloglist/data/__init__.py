from bloglist.data.statistics import favorite_blog, most_blogs, most_likes, total_likes

__all__ = ["favorite_blog", "most_blogs", "most_likes", "total_likes"]
