from flask import request, jsonify, current_app

from app.blueprints.search import search_bp
from app.exceptions import ValidationError
from app.models.content import Content
from app.services.search_service import SearchService


@search_bp.route('/search')
def search():
    """
    公开检索接口 (只读索引，只会返回已发布内容)
    ?q=关键词&type=article&tag=python
    """
    query = request.args.get('q', '', type=str).strip()
    content_type = request.args.get('type', '', type=str)
    tag = request.args.get('tag', '', type=str)

    if content_type and content_type not in Content.TYPES:
        raise ValidationError(f'Unknown content type: {content_type}',
                              payload={'allowed': list(Content.TYPES)})

    results = SearchService.search(
        query=query or None,
        content_type=content_type or None,
        tag=tag or None,
        limit=current_app.config['SEARCH_RESULT_LIMIT'],
    )
    return jsonify({'success': True, 'count': len(results), 'results': results})
