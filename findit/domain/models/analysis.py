# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Vertex:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vertex":
        # The API omits zero coordinates
        return cls(x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))


def _vertices(poly: Optional[Dict[str, Any]], key: str) -> List[Vertex]:
    if not poly:
        return []
    return [Vertex.from_dict(v) for v in poly.get(key, [])]


@dataclass
class DetectedObject:
    """Localized object; bounding box vertices are normalized to 0..1."""
    name: str
    confidence: float
    bounding_box: List[Vertex] = field(default_factory=list)


@dataclass
class Label:
    description: str
    confidence: float


@dataclass
class Face:
    joy_likelihood: str = "UNKNOWN"
    sorrow_likelihood: str = "UNKNOWN"
    anger_likelihood: str = "UNKNOWN"
    surprise_likelihood: str = "UNKNOWN"
    under_exposed_likelihood: str = "UNKNOWN"
    blurred_likelihood: str = "UNKNOWN"
    headwear_likelihood: str = "UNKNOWN"
    bounding_box: List[Vertex] = field(default_factory=list)


@dataclass
class Landmark:
    description: str
    confidence: float
    bounding_box: List[Vertex] = field(default_factory=list)


@dataclass
class Logo:
    description: str
    confidence: float
    bounding_box: List[Vertex] = field(default_factory=list)


@dataclass
class SafeSearch:
    adult: str = "UNKNOWN"
    spoof: str = "UNKNOWN"
    medical: str = "UNKNOWN"
    violence: str = "UNKNOWN"
    racy: str = "UNKNOWN"


@dataclass
class DominantColor:
    red: int
    green: int
    blue: int
    score: float
    pixel_fraction: float


@dataclass
class WebEntity:
    description: str
    score: float


@dataclass
class SimilarImage:
    url: str
    score: Optional[float] = None


@dataclass
class AnalysisResult:
    """
    Pure domain model for one Google Vision annotate response.
    
    Every section may be absent from the API response; missing sections
    become empty lists (or None for safe search).
    """
    text: str = ""
    objects: List[DetectedObject] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    landmarks: List[Landmark] = field(default_factory=list)
    logos: List[Logo] = field(default_factory=list)
    safe_search: Optional[SafeSearch] = None
    colors: List[DominantColor] = field(default_factory=list)
    web_entities: List[WebEntity] = field(default_factory=list)
    similar_images: List[SimilarImage] = field(default_factory=list)

    @classmethod
    def from_annotate_response(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """
        Build from a single entry of the ``responses`` array.
        
        Args:
            data: One ``AnnotateImageResponse`` JSON object
            
        Returns:
            AnalysisResult with every section populated or empty
        """
        text_annotations = data.get("textAnnotations") or []
        text = text_annotations[0].get("description", "") if text_annotations else ""

        objects = [
            DetectedObject(
                name=obj.get("name", ""),
                confidence=float(obj.get("score", 0.0)),
                bounding_box=_vertices(obj.get("boundingPoly"), "normalizedVertices"),
            )
            for obj in data.get("localizedObjectAnnotations") or []
        ]
        labels = [
            Label(description=label.get("description", ""), confidence=float(label.get("score", 0.0)))
            for label in data.get("labelAnnotations") or []
        ]
        faces = [
            Face(
                joy_likelihood=face.get("joyLikelihood", "UNKNOWN"),
                sorrow_likelihood=face.get("sorrowLikelihood", "UNKNOWN"),
                anger_likelihood=face.get("angerLikelihood", "UNKNOWN"),
                surprise_likelihood=face.get("surpriseLikelihood", "UNKNOWN"),
                under_exposed_likelihood=face.get("underExposedLikelihood", "UNKNOWN"),
                blurred_likelihood=face.get("blurredLikelihood", "UNKNOWN"),
                headwear_likelihood=face.get("headwearLikelihood", "UNKNOWN"),
                bounding_box=_vertices(face.get("boundingPoly"), "vertices"),
            )
            for face in data.get("faceAnnotations") or []
        ]
        landmarks = [
            Landmark(
                description=item.get("description", ""),
                confidence=float(item.get("score", 0.0)),
                bounding_box=_vertices(item.get("boundingPoly"), "vertices"),
            )
            for item in data.get("landmarkAnnotations") or []
        ]
        logos = [
            Logo(
                description=item.get("description", ""),
                confidence=float(item.get("score", 0.0)),
                bounding_box=_vertices(item.get("boundingPoly"), "vertices"),
            )
            for item in data.get("logoAnnotations") or []
        ]

        safe_search = None
        safe = data.get("safeSearchAnnotation")
        if safe:
            safe_search = SafeSearch(
                adult=safe.get("adult", "UNKNOWN"),
                spoof=safe.get("spoof", "UNKNOWN"),
                medical=safe.get("medical", "UNKNOWN"),
                violence=safe.get("violence", "UNKNOWN"),
                racy=safe.get("racy", "UNKNOWN"),
            )

        dominant = ((data.get("imagePropertiesAnnotation") or {}).get("dominantColors") or {}).get("colors") or []
        colors = [
            DominantColor(
                red=int(c.get("color", {}).get("red", 0)),
                green=int(c.get("color", {}).get("green", 0)),
                blue=int(c.get("color", {}).get("blue", 0)),
                score=float(c.get("score", 0.0)),
                pixel_fraction=float(c.get("pixelFraction", 0.0)),
            )
            for c in dominant
        ]

        web = data.get("webDetection") or {}
        web_entities = [
            WebEntity(description=e.get("description", ""), score=float(e.get("score", 0.0)))
            for e in web.get("webEntities") or []
            if e.get("description")
        ]
        similar_images = [
            SimilarImage(url=img["url"], score=img.get("score"))
            for img in web.get("visuallySimilarImages") or []
            if img.get("url")
        ]

        return cls(
            text=text,
            objects=objects,
            labels=labels,
            faces=faces,
            landmarks=landmarks,
            logos=logos,
            safe_search=safe_search,
            colors=colors,
            web_entities=web_entities,
            similar_images=similar_images,
        )
