"""Codec routes: percent-encode / decode strings and parameter sets."""

from __future__ import annotations

import logging
from flask import Blueprint, current_app, request
from urlcodec.middleware import api_response
from urlcodec.models import TextRequest, ParamsEncodeRequest, ParamsDecodeRequest
from urlcodec.services.codec import supported_encodings, encode, decode, url_encode, url_decode

codec_bp = Blueprint('codec', __name__)
logger = logging.getLogger(__name__)


def _json_body() -> dict:
	data = request.get_json(silent=True)
	if not isinstance(data, dict):
		raise ValueError('请求体必须是 JSON 对象')
	return data


def _defaults() -> tuple:
	return current_app.config['DEFAULT_ENCODING'], current_app.config['DECODE_ERRORS']


@codec_bp.route('/codec/encodings', methods=['GET'])
@api_response
def list_encodings():
	default_encoding, _ = _defaults()
	return {'encodings': supported_encodings(), 'default': default_encoding}


@codec_bp.route('/codec/encode', methods=['POST'])
@api_response
def encode_text():
	default_encoding, default_errors = _defaults()
	req = TextRequest.from_dict(_json_body(), default_encoding, default_errors)
	req.validate()
	return {'result': encode(req.text, req.encoding), 'encoding': req.encoding}


@codec_bp.route('/codec/decode', methods=['POST'])
@api_response
def decode_text():
	default_encoding, default_errors = _defaults()
	req = TextRequest.from_dict(_json_body(), default_encoding, default_errors)
	req.validate()
	return {'result': decode(req.text, req.encoding, errors=req.errors), 'encoding': req.encoding}


@codec_bp.route('/codec/url-encode', methods=['POST'])
@api_response
def encode_params():
	default_encoding, _ = _defaults()
	req = ParamsEncodeRequest.from_dict(_json_body(), default_encoding)
	req.validate()
	result = url_encode(req.params, req.encoding)
	logger.debug(f"url-encode: {len(req.params or {})} 个参数 ({req.encoding})")
	return {'result': result, 'encoding': req.encoding}


@codec_bp.route('/codec/url-decode', methods=['POST'])
@api_response
def decode_params():
	default_encoding, default_errors = _defaults()
	req = ParamsDecodeRequest.from_dict(_json_body(), default_encoding, default_errors)
	req.validate()
	params = url_decode(req.query, req.encoding, errors=req.errors)
	return {'params': params, 'total': len(params), 'encoding': req.encoding}


__all__ = ['codec_bp']
